# bag_of_holding/logging_config.py
import logging
import sys
from typing import Union


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Send log records to stderr with a timestamped, named format."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s", "%H:%M:%S"
    )
    handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=[handler], force=True)
