import logging

import structlog

from studylist.config import settings


def configure_logging() -> None:
    """Configure stdlib logging and structlog for the application.

    Events are rendered as JSON lines by default; set ``STUDY_LIST_LOG_JSON=false``
    for human-readable console output while developing.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level)
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


logger = structlog.get_logger()
