"""Logging configuration for the URL shortener."""

import json
import logging
import sys


LOGGER_NAME = "shortlink_app"

ENV_LOCAL = "local"
ENV_DEV = "dev"
ENV_PROD = "prod"


class JSONFormatter(logging.Formatter):
    """One JSON object per line; message text is escaped by json.dumps."""
    
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(env: str = ENV_LOCAL) -> logging.Logger:
    """Configure the application logger for an environment.
    
    local: text output at DEBUG
    dev:   JSON lines at DEBUG
    prod:  JSON lines at INFO
    
    Args:
        env: Environment name
        
    Returns:
        Configured logger
    """
    if env == ENV_PROD:
        level = logging.INFO
    else:
        level = logging.DEBUG
    
    if env in (ENV_DEV, ENV_PROD):
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    
    return logger
