"""Logging configuration."""

import logging
import sys

from accounting.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure application logging.

    SQL statements are logged at INFO only when ``sql_echo`` is on; otherwise
    the SQLAlchemy engine logger is held at WARNING.
    """
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    engine_level = logging.INFO if settings.sql_echo else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(engine_level)
    logging.getLogger("accounting").setLevel(settings.log_level.upper())
    logging.getLogger("uvicorn").setLevel(logging.INFO)
