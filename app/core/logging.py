# py
from loguru import logger
import sys


def configure_logging(level: str):
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time} {level} {name}:{function} {message}", serialize=False)
    logger.info("Logging configured at {}", level)
