from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO

from .config import Settings

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None

def configure_logging(settings: Settings, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach one handler to the 'minish' logger, replacing any earlier one."""
    global _handler
    root = logging.getLogger("minish")
    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()

    if settings.log_file:
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(settings.log_level)
    root.propagate = False
    _handler = handler
    return root

def release_logging() -> None:
    """Detach and close the handler installed by configure_logging()."""
    global _handler
    if _handler is None:
        return
    logging.getLogger("minish").removeHandler(_handler)
    _handler.close()
    _handler = None
