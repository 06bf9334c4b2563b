# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import os

import pygments.lexers
import pygments.styles
import pygments.util
from pygments.lexer import Lexer
from pygments.style import StyleMeta
from pygments.token import _TokenType

from gitannotate.qt import *
from gitannotate.toolbox.benchmark import benchmark

logger = logging.getLogger(__name__)

LineFormats = list[tuple[int, int, QTextCharFormat]]


def lexerForPath(path: str) -> Lexer | None:
    if not path:
        return None
    try:
        return pygments.lexers.get_lexer_for_filename(os.path.basename(path), stripnl=False, ensurenl=False)
    except pygments.util.ClassNotFound:
        return None


def styleByName(name: str) -> StyleMeta:
    try:
        return pygments.styles.get_style_by_name(name)
    except pygments.util.ClassNotFound:
        logger.warning(f"Unknown Pygments style '{name}', using default")
        return pygments.styles.get_style_by_name("default")


class SourceHighlighter(QSyntaxHighlighter):
    """
    Lexes the whole file with Pygments up front, then hands out the
    precomputed formats line by line.
    """

    lineFormats: list[LineFormats]

    def __init__(self, document: QTextDocument):
        super().__init__(document)
        self.lineFormats = []
        self.style = styleByName("default")
        self.formatCache: dict[_TokenType, QTextCharFormat | None] = {}

    def setStyleName(self, name: str):
        self.style = styleByName(name)
        self.formatCache = {}

    def clearSource(self):
        self.lineFormats = []

    @benchmark
    def setSource(self, path: str, text: str):
        self.lineFormats = []

        lexer = lexerForPath(path)
        if lexer is None:
            logger.debug(f"No lexer for {path}")
            return

        line: LineFormats = []
        column = 0

        for tokenType, value in lexer.get_tokens(text):
            chunks = value.split("\n")
            for i, chunk in enumerate(chunks):
                if i > 0:
                    self.lineFormats.append(line)
                    line = []
                    column = 0
                if not chunk:
                    continue
                charFormat = self.formatForToken(tokenType)
                if charFormat is not None:
                    line.append((column, len(chunk), charFormat))
                column += len(chunk)

        self.lineFormats.append(line)

    def formatForToken(self, tokenType: _TokenType) -> QTextCharFormat | None:
        try:
            return self.formatCache[tokenType]
        except KeyError:
            pass

        tokenStyle = self.style.style_for_token(tokenType)
        charFormat = None

        if tokenStyle["color"] or tokenStyle["bold"] or tokenStyle["italic"] or tokenStyle["underline"]:
            charFormat = QTextCharFormat()
            if tokenStyle["color"]:
                charFormat.setForeground(QColor("#" + tokenStyle["color"]))
            if tokenStyle["bold"]:
                charFormat.setFontWeight(QFont.Weight.Bold)
            if tokenStyle["italic"]:
                charFormat.setFontItalic(True)
            if tokenStyle["underline"]:
                charFormat.setFontUnderline(True)

        self.formatCache[tokenType] = charFormat
        return charFormat

    def highlightBlock(self, text: str):
        blockNumber = self.currentBlock().blockNumber()
        try:
            formats = self.lineFormats[blockNumber]
        except IndexError:
            return

        for start, length, charFormat in formats:
            self.setFormat(start, length, charFormat)
