# app/main.py
import uvicorn

from app.api import create_app
from app.utils.settings import HOST, LOG_LEVEL, PORT

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
