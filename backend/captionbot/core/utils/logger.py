import logging
import sys
from typing import Optional


_ROOT_NAME = "captionbot"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install a single stream handler on the package root logger."""
    global _handler
    root = logging.getLogger(_ROOT_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _handler is None or _handler not in root.handlers:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(_handler)
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(_ROOT_NAME)
    if name == _ROOT_NAME or name.startswith(_ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_NAME}.{name}")
