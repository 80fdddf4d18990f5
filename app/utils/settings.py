# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DATA_DIR = os.getenv("DATA_DIR", "data")
PRODUCTS_FILE = os.getenv("PRODUCTS_FILE", "products.json")
CARTS_FILE = os.getenv("CARTS_FILE", "carts.json")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
