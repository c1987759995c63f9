import logging
import sys
from typing import Optional

from training_calc.config import get_log_level


def setup_logging(level: Optional[str] = None) -> None:
    """
    Init du root logger. Les logs partent sur stderr, stdout reste réservé
    aux rapports.
    """
    log_level = (level or get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
