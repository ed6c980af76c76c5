import logging

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(name) -> int:
    """`LOG_LEVEL` value -> logging level; unknown names fall back to INFO."""
    level = logging.getLevelName(str(name or "").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level=None) -> None:
    """Process-wide setup, called once by each entry point (API app, seed script)."""
    logging.basicConfig(level=resolve_level(level or settings.log_level), format=LOG_FORMAT)
