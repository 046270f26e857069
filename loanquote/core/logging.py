from __future__ import annotations

import logging
from logging.config import dictConfig


def configure_logging(level: str = "INFO") -> None:
    """Route all log records, uvicorn's included, to stderr.

    Stdout is left to the rendered quote so the CLI output can be piped.
    """

    level = level.upper()
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "quote": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "quote",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                "": {"handlers": ["stderr"], "level": level},
                "loanquote": {"level": level},
                "uvicorn.error": {"handlers": ["stderr"], "level": level, "propagate": False},
                "uvicorn.access": {"handlers": ["stderr"], "level": level, "propagate": False},
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
