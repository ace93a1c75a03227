"""Allow running IntervalTimer as a module: python -m intervaltimer."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import IntervalTimerApp

LOG_LEVEL_ENV = "INTERVALTIMER_LOG_LEVEL"


def main() -> None:
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("IntervalTimer")
    app.setOrganizationName("IntervalTimer")

    window = IntervalTimerApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
