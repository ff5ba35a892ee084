# File: /second_brain_api/core/logging.py | Version: 2.0 | Title: App logging configuration (quiet httpx; JSON optional; context fields)
import json
import logging
import logging.config
import os

from second_brain_api.core.config import settings

# Extra fields that log calls may attach via `extra=` and that the JSON
# formatter copies into the payload.
CONTEXT_FIELDS = ("module_type", "user_id", "operation", "email")


def _boolenv(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


class JsonConsole(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                base[field] = value
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


def configure_logging() -> None:
    # Environment wins over .env so tests can flip modes with monkeypatch
    level = os.getenv("LOG_LEVEL", settings.LOG_LEVEL).upper()
    use_json = _boolenv("LOG_JSON", settings.LOG_JSON)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(levelname)s %(asctime)s %(name)s: %(message)s",
                "class": "logging.Formatter",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        "loggers": {
            "httpx": {"level": "WARNING", "propagate": False},
            "httpcore": {"level": "WARNING", "propagate": False},
            "python_multipart.multipart": {"level": "WARNING"},
            "passlib": {"level": "ERROR"},
            "uvicorn": {"level": level},
            "uvicorn.error": {"level": level},
            "uvicorn.access": {"level": level},
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    }

    logging.config.dictConfig(config)

    if use_json:
        for h in logging.getLogger().handlers:
            h.setFormatter(JsonConsole())
