# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from gitannotate import settings
from gitannotate.qt import *
from gitannotate.sourceview.sourcehighlighter import SourceHighlighter

logger = logging.getLogger(__name__)


def configureMonoView(view: QPlainTextEdit):
    """ Settings shared by the source view and the annotation pane so that their lines stay the same height. """
    font = settings.prefs.monoFont()
    view.setFont(font)
    view.document().setDefaultFont(font)
    view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
    view.setReadOnly(True)
    view.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse | Qt.TextInteractionFlag.TextSelectableByKeyboard)


class SourceView(QPlainTextEdit):
    filePath: str
    highlighter: SourceHighlighter

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("SourceView")

        self.filePath = ""

        configureMonoView(self)
        tabWidth = settings.prefs.tabSpaces
        self.setTabStopDistance(QFontMetricsF(self.font()).horizontalAdvance(' ' * tabWidth))
        self.setCursorWidth(2)

        self.highlighter = SourceHighlighter(self.document())
        self.highlighter.setStyleName(settings.prefs.syntaxStyle)

    def setSource(self, path: str, text: str):
        self.filePath = path

        if settings.prefs.syntaxHighlighting:
            self.highlighter.setSource(path, text)
        else:
            self.highlighter.clearSource()

        # setPlainText triggers the highlighter
        self.setPlainText(text)

    def topLine(self) -> int:
        # With line wrapping OFF, QScrollBar.value() perfectly matches up with line numbers.
        assert self.lineWrapMode() == QPlainTextEdit.LineWrapMode.NoWrap
        return self.verticalScrollBar().value()

    def setTopLine(self, line: int):
        self.verticalScrollBar().setValue(line)
