"""Process-wide logging setup.

Library modules log through ``logging.getLogger(__name__)``; everything under
the ``courseboard`` namespace ends up on the handler installed here.
"""
from __future__ import annotations

import logging
import sys
import uuid

from courseboard.config import settings

_SESSION_ID = uuid.uuid4().hex[:12]


def get_session_id() -> str:
    """Identifier of this process, stamped on every log record."""
    return _SESSION_ID


class _SessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = _SESSION_ID
        return True


def _configure() -> logging.Logger:
    log = logging.getLogger("courseboard")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.addFilter(_SessionFilter())
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s [%(session_id)s] %(name)s: %(message)s"
        ))
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    return log


logger = _configure()
