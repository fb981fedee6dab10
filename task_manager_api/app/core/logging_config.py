"""
Logging configuration for the Task Manager API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Every module logs through
``logging.getLogger(__name__)`` so records carry the dotted module
path, e.g. ``task_manager_api.app.services.task_service``.

SQL statements are logged by ``core.db`` on the ``task_manager_api.sql``
logger at DEBUG level when ``DEBUG`` is enabled in the settings.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SQL_LOGGER_NAME = "task_manager_api.sql"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug_sql: bool = False) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name (``"DEBUG"``, ``"INFO"``...), case insensitive.
        Unknown names fall back to INFO.
    logfile : Optional[str]
        Path of a file receiving the same records as the console.
    debug_sql : bool
        Lower the SQL logger to DEBUG regardless of ``level``.
    """
    root = logging.getLogger()
    if root.handlers:
        # pytest and repeated create_app calls install handlers first.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if debug_sql:
        logging.getLogger(SQL_LOGGER_NAME).setLevel(logging.DEBUG)
