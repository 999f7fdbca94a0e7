"""
Process-wide logging for the Fritter API.

``create_app`` calls :func:`setup_logging` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Records go to stderr and, when
``LOG_FILE`` is set, are also appended to that file; its parent
directory is created if missing.  Services log through
``logging.getLogger(__name__)`` and never configure handlers
themselves.

The root logger is only configured while it has no handlers, so
building several apps in one process (the test suite does) or running
under a server that installed its own handlers leaves the existing
setup alone.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_from_name(name: str) -> int:
    """Map ``"debug"``/``"INFO"``/... to a level; unknown names mean INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the console handler and the optional ``LOG_FILE`` handler.

    ``logfile`` is resolved against the working directory of the
    process, not the package; an empty string behaves like ``None``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_level_from_name(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
