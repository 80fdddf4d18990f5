# app/utils/logging.py
import logging
import sys

from app.utils.settings import LOG_LEVEL

logging.basicConfig(
    stream=sys.stdout,
    level=LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
