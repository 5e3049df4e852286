"""
Logging setup shared by the API and the uvicorn server.

``setup_logging`` installs the application's handlers on the root
logger from ``Settings`` (``LOG_LEVEL`` and ``LOG_FILE``).  Calling it
again, for example when tests build several apps, replaces the handlers
it installed earlier and leaves handlers owned by anyone else alone.

uvicorn configures its own loggers unless told otherwise.
``uvicorn_log_config`` returns a ``dictConfig`` mapping that strips
uvicorn's handlers and lets its records propagate to the root logger,
so server and application lines share one format, one level and the
optional log file.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Marks handlers installed by ``setup_logging``.
_OWNED = "_practice_api_handler"


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, _OWNED, False)]:
        root.removeHandler(handler)
        handler.close()

    level = resolve_level(settings.log_level)
    root.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(level)


def uvicorn_log_config(settings: Settings) -> Dict[str, Any]:
    """``log_config`` for uvicorn that defers to the root configuration."""
    level = logging.getLevelName(resolve_level(settings.log_level))
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "loggers": {
            name: {"handlers": [], "level": level, "propagate": True}
            for name in UVICORN_LOGGERS
        },
    }
