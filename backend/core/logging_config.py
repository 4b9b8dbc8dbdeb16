"""Logging setup for the Geofence API.

``setup_logging`` hands the console handler (plus a file handler when
``LOG_FILE`` is set) to ``logging.basicConfig``, which leaves an already
configured root logger alone. Calling ``create_app`` repeatedly in tests
therefore never stacks duplicate handlers.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    handlers = [logging.StreamHandler()]
    if logfile:
        # relative paths land in the process working directory
        handlers.append(logging.FileHandler(logfile, encoding="utf-8", delay=True))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )
