import logging
import sys
from typing import Any, Dict

import structlog

from .config import settings

PACKAGE_LOGGER = "msgraph_profile"
_HANDLER_NAME = "msgraph-profile-stdout"


def _add_app_context(_: Any, __: Any, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict.setdefault("service", "msgraph-profile")
    return event_dict


def configure_logging(level: str | None = None) -> None:
    """Render this package's events as JSON lines on stdout.

    Only the ``msgraph_profile`` logger gets a handler; the embedding
    application's root handlers are left alone.
    """
    timestamper = structlog.processors.TimeStamper(fmt="iso")
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            timestamper,
            _add_app_context,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel((level or settings.log_level).upper())
    package_logger.propagate = False
