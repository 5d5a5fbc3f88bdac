"""
Root logger setup for the services host.

Every unit shares one process, so logging is configured once for all
of them, after ``.env`` has been loaded: by ``hybrid_api.launcher.main``
or, when the calculator runs on its own, by its ``entrypoint``.
Launcher diagnostics (``Starting service: ...``) and service logs go to
stdout, next to uvicorn's access log; ``LOG_FILE`` adds a copy on disk.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach stdout (and optionally file) handlers to the root logger.

    Does nothing when the root logger already has handlers, so the
    first caller wins.  ``level`` is a level name in any case; names
    ``logging`` does not know fall back to ``INFO``.  ``logfile`` is
    resolved against the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    root.addHandler(stdout_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
