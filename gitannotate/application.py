# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

# Import as few internal modules as possible here to avoid premature initialization
# from cascading imports before the QApplication has booted.
from gitannotate.qt import *

if TYPE_CHECKING:
    from gitannotate.sourcewindow import SourceWindow

logger = logging.getLogger(__name__)


class AnnotateApplication(QApplication):
    windows: list[SourceWindow]
    commandLinePaths: list[str]

    @staticmethod
    def instance() -> AnnotateApplication:
        me = QApplication.instance()
        assert isinstance(me, AnnotateApplication)
        return me

    def __init__(self, argv: list[str]):
        super().__init__(argv)
        self.setObjectName("AnnotateApplication")

        self.windows = []
        self.commandLinePaths = []

        self.setApplicationName(APP_SYSTEM_NAME)  # used by QStandardPaths
        self.setApplicationDisplayName(APP_DISPLAY_NAME)  # user-friendly name
        self.setApplicationVersion(APP_VERSION)
        self.setDesktopFileName(APP_IDENTIFIER)

        # Process command line
        parser = QCommandLineParser()
        parser.setApplicationDescription(qAppName() + " - Browse a file with a git blame sidebar.")
        parser.addHelpOption()
        parser.addVersionOption()
        parser.addPositionalArgument("files", "Files to open on launch.", "[files...]")
        parser.process(argv)

        self.commandLinePaths = [str(Path(p).resolve()) for p in parser.positionalArguments()]

        self.aboutToQuit.connect(self.endSession)

    def beginSession(self, bootUi=True):
        from gitannotate import settings
        from gitannotate.gitdriver import GitDriver

        # Load prefs file (no-op in test mode)
        settings.prefs.load()
        self.applyLoggingLevelPref()
        GitDriver.setGitPath(settings.prefs.gitPath)

        if not bootUi:
            return

        if not self.commandLinePaths:
            self.newWindow().show()

        for path in self.commandLinePaths:
            try:
                self.openFile(path)
            except OSError as exc:
                logger.warning(f"Couldn't open {path}: {exc}")
                self.newWindow().show()

    def endSession(self):
        from gitannotate import settings
        for window in self.windows:
            window.sidebar.close()
        self.windows.clear()
        settings.prefs.write()

    def applyLoggingLevelPref(self):
        from gitannotate import settings
        logging.root.setLevel(settings.prefs.verbosity.value)

    def newWindow(self) -> SourceWindow:
        from gitannotate.sourcewindow import SourceWindow
        window = SourceWindow()
        window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        window.destroyed.connect(lambda: self.forgetWindow(window))
        self.windows.append(window)
        return window

    def forgetWindow(self, window: SourceWindow):
        if window in self.windows:
            self.windows.remove(window)

    def openFile(self, path: str) -> SourceWindow:
        window = self.newWindow()
        try:
            window.openFile(path)
        except OSError:
            window.close()
            raise
        window.show()
        return window
