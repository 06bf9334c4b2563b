# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import logging
import os

from gitannotate import settings
from gitannotate.qt import *
from gitannotate.qthost import QtHost
from gitannotate.sidebarsession import SidebarController
from gitannotate.sourceview import AnnotationPane, SourceView
from gitannotate.toolbox.qtutils import makeWidgetShortcut

logger = logging.getLogger(__name__)

TOGGLE_SIDEBAR_KEYS = ("Ctrl+Shift+B", "F2")


class SourceWindow(QWidget):
    sourceView: SourceView
    host: QtHost
    sidebar: SidebarController

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("SourceWindow")

        self.sourceView = SourceView(self)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(QMargins())
        layout.setSpacing(0)
        layout.addWidget(self.sourceView)

        prefs = settings.prefs
        self.host = QtHost(self)
        self.sidebar = SidebarController(
            self.host,
            mapper=prefs.gradientMapper(),
            widthColumns=prefs.sidebarWidth,
            withAuthorMail=prefs.showAuthorMail)

        makeWidgetShortcut(self, self.toggleSidebar, *TOGGLE_SIDEBAR_KEYS,
                           context=Qt.ShortcutContext.WindowShortcut)
        makeWidgetShortcut(self, self.promptOpenFile, QKeySequence.StandardKey.Open,
                           context=Qt.ShortcutContext.WindowShortcut)

        self.setWindowTitle(qAppName())
        self.resize(900, 700)

    def closeEvent(self, event: QCloseEvent):
        self.sidebar.close()
        super().closeEvent(event)

    # -------------------------------------------------------------------------

    def openFile(self, path: str):
        path = os.path.abspath(path)
        with open(path, encoding="utf-8", errors="replace") as f:
            text = f.read()

        # Annotations for the previous file are meaningless now
        self.sidebar.close()

        self.sourceView.setSource(path, text)
        self.setWindowTitle(f"{os.path.basename(path)} - {qAppName()}")
        logger.info(f"Opened {path}")

    def promptOpenFile(self):
        startDir = os.path.dirname(self.sourceView.filePath)
        path, _dummy = QFileDialog.getOpenFileName(self, "Open File", startDir)
        if not path:
            return
        try:
            self.openFile(path)
        except OSError as exc:
            self.host.reportError(f"Couldn't open {path}\n{exc}")

    def toggleSidebar(self):
        self.sidebar.toggle()

    # -------------------------------------------------------------------------
    # Pane placement (called by QtHost)

    def insertPane(self, pane: AnnotationPane):
        # Far left, like a "topleft" split
        self.layout().insertWidget(0, pane)
        pane.show()
        # Lay out now so the pane's scroll range is valid before the first sync
        self.layout().activate()

    def removePane(self, pane: AnnotationPane):
        self.layout().removeWidget(pane)
        pane.hide()
