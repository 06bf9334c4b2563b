# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from gitannotate.blame import Rgb
from gitannotate.gitdriver import GitDriver
from gitannotate.host import AnnotateHost, BlameResult, ScrollCallback, Subscription
from gitannotate.qt import *
from gitannotate.sourceview import AnnotationPane, SourceView
from gitannotate.toolbox.qtutils import makeWidgetShortcut

if TYPE_CHECKING:
    from gitannotate.sourcewindow import SourceWindow

logger = logging.getLogger(__name__)


class QtHost(AnnotateHost):
    """
    AnnotateHost backed by the widgets of a SourceWindow.
    View handles are the QPlainTextEdit widgets themselves.
    """

    window: SourceWindow
    liveViews: set[QPlainTextEdit]

    def __init__(self, window: SourceWindow):
        self.window = window
        self.liveViews = set()
        self.trackView(window.sourceView)

    def trackView(self, view: QPlainTextEdit):
        self.liveViews.add(view)
        view.destroyed.connect(lambda: self.liveViews.discard(view))

    def currentFilePath(self) -> str:
        return self.window.sourceView.filePath

    def runBlame(self, path: str) -> BlameResult:
        return GitDriver.runBlame(path)

    def currentView(self) -> SourceView:
        return self.window.sourceView

    def focusView(self, view: QPlainTextEdit):
        view.setFocus()

    def reportError(self, message: str):
        text, _dummy, details = message.partition("\n")
        qmb = QMessageBox(QMessageBox.Icon.Warning, qAppName(), text, QMessageBox.StandardButton.Ok, self.window)
        qmb.setObjectName("AnnotateErrorBox")
        qmb.setInformativeText(details)
        qmb.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        qmb.show()

    # ---------------------------------------------
    # Annotation pane

    def createPane(self, primary: SourceView, widthColumns: int) -> AnnotationPane:
        pane = AnnotationPane(primary, widthColumns, parent=self.window)
        self.trackView(pane)
        self.window.insertPane(pane)
        return pane

    def writePaneLines(self, pane: AnnotationPane, lines: Sequence[str]):
        pane.setLines(lines)

    def highlightPaneLines(self, pane: AnnotationPane, firstLine: int, lastLine: int, color: Rgb):
        pane.highlightLines(firstLine, lastLine, QColor(*color))

    def lockPane(self, pane: AnnotationPane, tag: str):
        pane.setReadOnly(True)
        pane.setObjectName(tag)

    def findTaggedPane(self, primary: SourceView, tag: str) -> AnnotationPane | None:
        for pane in self.window.findChildren(AnnotationPane, tag):
            if pane.primaryView is primary and self.isViewAlive(pane):
                return pane
        return None

    def bindPaneKeys(self, pane: AnnotationPane, keys: Sequence[str], callback: Callable[[], None]):
        for key in keys:
            makeWidgetShortcut(pane, callback, key)

    def closePane(self, pane: AnnotationPane):
        self.liveViews.discard(pane)
        self.window.removePane(pane)
        pane.deleteLater()

    # ---------------------------------------------
    # Scrolling

    def isViewAlive(self, view: QPlainTextEdit | None) -> bool:
        return view is not None and view in self.liveViews

    def topLine(self, view: QPlainTextEdit) -> int:
        return view.verticalScrollBar().value()

    def setTopLine(self, view: QPlainTextEdit, line: int):
        view.verticalScrollBar().setValue(line)

    def subscribeScroll(self, view: QPlainTextEdit, callback: ScrollCallback) -> Subscription:
        scrollBar = view.verticalScrollBar()
        connection = scrollBar.valueChanged.connect(lambda _value: callback(view))

        def disconnect():
            # The scroll bar dies along with its view
            if self.isViewAlive(view):
                scrollBar.valueChanged.disconnect(connection)

        return Subscription(disconnect)
