"""Allow running Countdown Timer as a module: python -m countdowntimer."""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import CountdownTimerApp
from .log import setup_logging
from .settings import load_settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="countdowntimer")
    parser.add_argument(
        "--log-level",
        default=None,
        help="override the configured log level (DEBUG, INFO, ...)",
    )
    # Qt consumes its own flags from sys.argv
    args, _unknown = parser.parse_known_args(argv)
    return args


def main() -> None:
    args = parse_args(sys.argv[1:])
    settings = load_settings()
    setup_logging(args.log_level or settings.log_level)
    logging.getLogger(__name__).info("Countdown Timer starting")

    app = QApplication(sys.argv)
    app.setApplicationName("Countdown Timer")
    app.setOrganizationName("CountdownTimer")

    window = CountdownTimerApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
