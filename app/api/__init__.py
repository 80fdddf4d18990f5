# app/api/__init__.py
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routers import carts, products
from app.api.routers.health import router as health_router
from app.data.database import init_storage
from app.domain.errors import ErrorKind, RepositoryError
from app.domain.schemas import error_body
from app.utils.logging import get_logger

logger = get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.STORAGE_CORRUPT: 500,
}


def create_app(data_dir: str | Path | None = None) -> FastAPI:
    app = FastAPI(title="Products & Carts API", version="1.0.0")
    app.state.storage = init_storage(data_dir)

    @app.get("/", include_in_schema=False)
    def welcome():
        return {"status": "success", "message": "Welcome to the Products & Carts API"}

    app.include_router(health_router)
    app.include_router(products.router)
    app.include_router(carts.router)

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError):
        status = STATUS_BY_KIND.get(exc.kind, 500)
        if status >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=status, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Malformed request for {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content=error_body("Request body must be a JSON object"))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            url = request.url.path + (f"?{request.url.query}" if request.url.query else "")
            return JSONResponse(status_code=404, content=error_body(f"Route {url} not found"))
        return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content=error_body("Internal server error"))

    return app
