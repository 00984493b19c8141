# src/twentyone/main.py

import sys

from twentyone.cardfx.display import Display
from twentyone.common.config import DEFAULT_CONFIG
from twentyone.common.constants import INTERRUPT_EXIT_CODE
from twentyone.common.logging_utils import setup_logging, get_logger
from twentyone.game.session import Session


log = get_logger("main")


def main() -> int:
    setup_logging()

    display = Display(config=DEFAULT_CONFIG)
    display.open()
    try:
        money = Session(display, DEFAULT_CONFIG).play()
        log.info(f"Player left with ${money}")
        return 0
    except (KeyboardInterrupt, EOFError):
        log.info("Input interrupted, exiting")
        return INTERRUPT_EXIT_CODE
    finally:
        display.close()


if __name__ == "__main__":
    sys.exit(main())
