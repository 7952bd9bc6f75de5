"""Logging configuration for the application.

Every record carries the admin location of the request that emitted it
(``location=-`` outside a location context).
"""

import logging
import sys

from storeadmin.core.config import get_settings
from storeadmin.core.location_context import get_location_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [location=%(location_id)s] %(message)s"


class LocationLogFilter(logging.Filter):
    """Stamp records with the current location id."""

    def filter(self, record: logging.LogRecord) -> bool:
        location_id = get_location_id()
        record.location_id = "-" if location_id is None else location_id
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO. Output goes to
    stdout. SQLAlchemy engine logging stays at WARNING unless database_echo
    is set.
    """
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(LocationLogFilter())
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[handler],
    )
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
