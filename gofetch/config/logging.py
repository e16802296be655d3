import logging
import logging.config
import sys
from typing import Dict, Any, Optional

from gofetch.config.settings import settings


def setup_logging(log_level: Optional[str] = None, log_file: str | None = None) -> None:
    """Setup logging configuration.

    Args:
        log_level: Level for the gofetch loggers (defaults to the configured
            ``LOG_LEVEL``)
        log_file: Optional path of a rotating log file
    """
    log_level = (log_level or settings.log_level).upper()

    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": "default",
                "level": log_level,
            },
        },
        "loggers": {
            "gofetch": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
            "httpx": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    }

    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "formatter": "detailed",
            "level": log_level,
        }
        for logger_config in config["loggers"].values():
            logger_config["handlers"].append("file")
        config["root"]["handlers"].append("file")

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``gofetch`` namespace."""
    if name == "gofetch" or name.startswith("gofetch."):
        return logging.getLogger(name)
    return logging.getLogger(f"gofetch.{name}")


def mask_sensitive_data(data: str | None, mask_length: int = 4) -> str:
    """Mask sensitive data for logging."""
    if not data or len(data) <= mask_length * 2:
        return "*" * len(data) if data else ""

    return f"{data[:mask_length]}{'*' * (len(data) - mask_length * 2)}{data[-mask_length:]}"
