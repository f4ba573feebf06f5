from __future__ import annotations

import logging
import sys
from typing import Optional

from cinedata.core.config import settings


# PUBLIC_INTERFACE
def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging with a single stdout handler."""
    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    handler.setFormatter(formatter)

    root = logging.getLogger()
    # Remove pre-existing default handlers configured elsewhere (e.g., basicConfig)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel((level or settings.LOG_LEVEL or "INFO").upper())

    # pymongo is chatty at DEBUG (heartbeats, pool events)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
