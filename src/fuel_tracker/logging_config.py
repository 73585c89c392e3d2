import copy
import logging
import logging.config
import os

LOG_DIR = "logs"


LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
        "verbose": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - "
            "%(message)s [%(filename)s:%(lineno)s]",
        },
    },
    "handlers": {
        "console": {
            "level": "INFO",
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
        "file": {
            "level": "DEBUG",
            "class": "logging.FileHandler",
            "filename": f"{LOG_DIR}/app.log",
            "formatter": "verbose",
        },
        "error_file": {
            "level": "ERROR",
            "class": "logging.FileHandler",
            "filename": f"{LOG_DIR}/error.log",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "fastapi": {
            "level": "INFO",
            "handlers": ["console", "file"],
            "propagate": True,
        },
        "uvicorn": {
            "level": "INFO",
            "handlers": ["console", "file"],
            "propagate": True,
        },
        "src.fuel_tracker": {
            "level": "DEBUG",
            "handlers": ["console", "file", "error_file"],
            "propagate": False,
        },
    },
    "root": {"level": "INFO", "handlers": ["console", "file"]},
}


def setup_logging(debug: bool = False):
    """Apply LOGGING_CONFIG; debug lowers the console handler to DEBUG."""
    if not os.path.exists(LOG_DIR):
        os.mkdir(LOG_DIR)
    config = copy.deepcopy(LOGGING_CONFIG)
    if debug:
        config["handlers"]["console"]["level"] = "DEBUG"
    logging.config.dictConfig(config)
