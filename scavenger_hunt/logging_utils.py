# scavenger_hunt/logging_utils.py

import logging
import os
from typing import Optional


# Environment switch:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
def env_log_level() -> str:
    """LOG_LEVEL as currently set in the environment."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging(level: Optional[str] = None) -> None:
    """Call once at program start (app.py and demo.py). Defaults to LOG_LEVEL."""
    level = (level or env_log_level()).upper()
    numeric = getattr(logging, level, logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(numeric)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def describe_hand(hand) -> str:
    """Short one-line hand summary for log messages."""
    if not hand:
        return "(empty)"
    return " ".join(str(c) for c in hand)
