import logging
from typing import Optional

from sea.settings import settings

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging once for the whole project.

    Dispatch logs every observer call at DEBUG, so DEBUG traces whole
    emissions; failures are logged at WARNING before they propagate.
    """
    log_level = level or settings.log_level
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        format=getattr(settings, "log_format", DEFAULT_FORMAT),
        level=numeric_level,
        force=True,  # ensure we override any prior configuration
    )
    logging.getLogger("sea").setLevel(numeric_level)
