# config/logging_setup.py
import logging
import logging.config
import os
import re

_SECRET_PARAMS = re.compile(r"((?:passwd|password|_sid|sid)=)[^&\s'\"]+", re.IGNORECASE)


class RedactSecrets(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        msg = str(record.getMessage())
        redacted = _SECRET_PARAMS.sub(r"\1[REDACTED]", msg)
        if redacted != msg:
            record.msg = redacted
            record.args = ()
        return True


def setup_logging(level: str = "INFO", log_file: str = "") -> None:
    level = level.upper()

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # stdout carries the MCP protocol, so the console handler must use stderr
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "standard",
            "filters": ["redact_secrets"],
            "stream": "ext://sys.stderr",
        }
    }

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "filename": log_file,
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "encoding": "utf-8",
            "formatter": "standard",
            "filters": ["redact_secrets"],
        }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"redact_secrets": {"()": RedactSecrets}},
        "formatters": {"standard": {"format": fmt, "datefmt": datefmt}},
        "handlers": handlers,
        "loggers": {
            "": {"level": level, "handlers": list(handlers.keys())},
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
    }

    logging.config.dictConfig(config)
    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["setup_logging", "get_logger", "RedactSecrets"]
