"""
Logging configuration with secret redaction
"""

import logging
import logging.config
from typing import Any, Dict, Iterable, Optional

REDACTED = "***"


class SecretRedactionFilter(logging.Filter):
    """Filter that masks credentials in log messages."""

    def __init__(self, secrets: Optional[Iterable[str]] = None):
        super().__init__()
        self.secrets = [s for s in (secrets or []) if s]

    def filter(self, record: logging.LogRecord) -> bool:
        """Replace any configured secret in the rendered message."""
        if not self.secrets:
            return True
        message = record.getMessage()
        redacted = message
        for secret in self.secrets:
            redacted = redacted.replace(secret, REDACTED)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True  # Never drop records, only mask them


def get_logging_config(level: str = "INFO", secrets: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """Get logging configuration with secret redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "secret_redaction": {
                "()": SecretRedactionFilter,
                "secrets": list(secrets or []),
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
                "filters": ["secret_redaction"]
            }
        },
        "loggers": {
            "kubeinit": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO", secrets: Optional[Iterable[str]] = None) -> None:
    """Apply get_logging_config()."""
    logging.config.dictConfig(get_logging_config(level, secrets))
