# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import logging
import signal
import sys

from gitannotate.qt import *


def main():
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING,
        format='%(levelname).1s %(asctime)s %(filename)-16s | %(message)s',
        datefmt="%H:%M:%S")
    logging.captureWarnings(True)

    # Initialize the application
    from gitannotate.application import AnnotateApplication
    app = AnnotateApplication(sys.argv)

    # Quit app cleanly on Ctrl+C
    def onSigint(*_dummy):
        QTimer.singleShot(0, app.quit)
    signal.signal(signal.SIGINT, onSigint)

    # Force Python interpreter to run every now and then so it can run the Ctrl+C signal handler
    if __debug__:
        timer = QTimer()
        timer.start(300)
        timer.timeout.connect(lambda: None)

    app.beginSession()

    returnCode = app.exec()
    sys.exit(returnCode)


if __name__ == "__main__":
    main()
