"""Logging configuration for flowcast."""

import logging
import logging.config
import os


class ColourizedFormatter(logging.Formatter):
    """Formatter that colours the level name for terminal output."""

    GREY = "\x1b[90m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        orig_levelname = record.levelname
        if record.levelno in self.LEVEL_COLORS:
            record.levelname = f"{self.LEVEL_COLORS[record.levelno]}{record.levelname}{self.RESET}"
        result = super().format(record)
        record.levelname = orig_levelname
        return result


def get_logging_config(level: str | None = None) -> dict:
    """Build a dictConfig mapping.

    Args:
        level: Log level name; falls back to FLOWCAST_LOG_LEVEL, then WARNING
    """
    log_level_name = (level or os.getenv("FLOWCAST_LOG_LEVEL", "WARNING")).upper()
    log_dir = os.getenv("FLOWCAST_LOG_DIR")
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "default",
        },
    }
    root_handlers = ["console"]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": os.path.join(log_dir, "flowcast.log"),
            "formatter": "plain",
        }
        root_handlers.append("file")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "flowcast.logger.ColourizedFormatter",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
            "plain": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": handlers,
        "loggers": {
            "flowcast": {
                "handlers": root_handlers,
                "level": log_level_name,
                "propagate": False,
            },
        },
    }


def setup_logging(level: str | None = None) -> None:
    logging.config.dictConfig(get_logging_config(level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
