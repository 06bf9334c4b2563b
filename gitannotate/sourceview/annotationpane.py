# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Sequence

from gitannotate.qt import *
from gitannotate.sourceview.sourceview import SourceView, configureMonoView
from gitannotate.toolbox.qtutils import textColorFor


class AnnotationPane(QPlainTextEdit):
    """
    Fixed-width strip showing one annotation per line of a SourceView.
    Its scroll position is driven from the outside; wheel events are
    forwarded to the source view.
    """

    primaryView: SourceView

    def __init__(self, primaryView: SourceView, widthColumns: int, parent=None):
        super().__init__(parent)
        self.primaryView = primaryView

        configureMonoView(self)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        # Lets the pane scroll as far down as the source view, even if it's shorter
        self.setCenterOnScroll(True)

        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Expanding)
        self.setFixedWidth(self.widthForColumns(widthColumns))

    def widthForColumns(self, columns: int) -> int:
        charWidth = QFontMetricsF(self.font()).horizontalAdvance("x" * columns)
        margins = 2 * (self.frameWidth() + self.document().documentMargin())
        return int(charWidth + margins) + 1

    def setLines(self, lines: Sequence[str]):
        self.setPlainText("\n".join(lines))

    def highlightLines(self, firstLine: int, lastLine: int, color: QColor):
        document = self.document()
        block = document.findBlockByNumber(firstLine)

        blockFormat = QTextBlockFormat()
        blockFormat.setBackground(color)
        charFormat = QTextCharFormat()
        charFormat.setForeground(textColorFor(color))

        cursor = QTextCursor(document)
        cursor.beginEditBlock()
        while block.isValid() and block.blockNumber() <= lastLine:
            cursor.setPosition(block.position())
            cursor.mergeBlockFormat(blockFormat)
            cursor.movePosition(QTextCursor.MoveOperation.EndOfBlock, QTextCursor.MoveMode.KeepAnchor)
            cursor.mergeCharFormat(charFormat)
            block = block.next()
        cursor.endEditBlock()

    def lineBackground(self, line: int) -> QColor | None:
        blockFormat = self.document().findBlockByNumber(line).blockFormat()
        if not blockFormat.hasProperty(QTextFormat.Property.BackgroundBrush):
            return None
        return blockFormat.background().color()

    def wheelEvent(self, event: QWheelEvent):
        # Forward mouse wheel to the source view, which drives our scroll position
        self.primaryView.wheelEvent(event)
