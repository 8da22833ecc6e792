import logging

import structlog

from .config import SETTINGS

structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, SETTINGS.log_level.upper(), logging.INFO)
    ),
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
)
logger = structlog.get_logger()
