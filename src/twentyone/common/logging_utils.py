# src/twentyone/common/logging_utils.py

import logging
import os
from typing import Optional, Sequence

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
#   LOG_FILE=path  write records there instead of stderr (stderr shares the game screen)
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("LOG_FILE") or None


def setup_logging(level: str = LOG_LEVEL, filename: Optional[str] = LOG_FILE) -> None:
    """Call once at program start (twentyone/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        filename=filename,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def format_hand(hand: Sequence) -> str:
    """Short hand listing: 'A♠ 10♥ 6♦'."""
    return " ".join(str(c) for c in hand) or "-"


def log_hand(
    logger: logging.Logger,
    who: str,                     # participant name
    hand: Sequence,
    total: int,
    note: str = "",
    level: int = logging.DEBUG,
) -> None:
    """
    Unified hand log.
    hand: the cards held right now, total: the scored total for them.
    """
    base = f"[{who}] {format_hand(hand)} total={total}"
    if note:
        base += f" | {note}"
    logger.log(level, base)
