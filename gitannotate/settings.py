# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import dataclasses
import enum
import logging

from gitannotate.blame import (
    DEFAULT_NEWEST_COLOR, DEFAULT_NUM_BUCKETS, DEFAULT_OLDEST_COLOR,
    GradientColorMapper, formatHexColor, parseHexColor)
from gitannotate.prefsfile import PrefsFile
from gitannotate.qt import *
from gitannotate.toolbox.benchmark import BENCHMARK_LOGGING_LEVEL

logger = logging.getLogger(__name__)


class QtApiNames(enum.StrEnum):
    Automatic = ""
    PyQt6 = "pyqt6"
    PySide6 = "pyside6"


class LoggingLevel(enum.IntEnum):
    Benchmark = BENCHMARK_LOGGING_LEVEL
    Debug = logging.DEBUG
    Info = logging.INFO
    Warning = logging.WARNING


@dataclasses.dataclass
class Prefs(PrefsFile):
    _filename = "prefs.json"

    _category_annotate          : int                   = 0
    sidebarWidth                : int                   = 30
    gradientLevels              : int                   = DEFAULT_NUM_BUCKETS
    oldestColor                 : str                   = formatHexColor(DEFAULT_OLDEST_COLOR)
    newestColor                 : str                   = formatHexColor(DEFAULT_NEWEST_COLOR)
    showAuthorMail              : bool                  = False

    _category_view              : int                   = 0
    font                        : str                   = ""
    fontSize                    : int                   = 0
    tabSpaces                   : int                   = 4
    syntaxHighlighting          : bool                  = True
    syntaxStyle                 : str                   = "default"

    _category_advanced          : int                   = 0
    gitPath                     : str                   = "git"
    verbosity                   : LoggingLevel          = LoggingLevel.Debug if APP_TESTMODE else LoggingLevel.Warning
    forceQtApi                  : QtApiNames            = QtApiNames.Automatic

    def monoFont(self):
        monoFont = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        if self.font:
            monoFont.fromString(self.font)
        if self.fontSize > 0:
            monoFont.setPointSize(self.fontSize)
        return monoFont

    def gradientMapper(self) -> GradientColorMapper:
        defaults = Prefs()
        try:
            oldest = parseHexColor(self.oldestColor)
            newest = parseHexColor(self.newestColor)
        except ValueError as exc:
            logger.warning(f"Bad gradient color in prefs, using defaults: {exc}")
            oldest = parseHexColor(defaults.oldestColor)
            newest = parseHexColor(defaults.newestColor)

        levels = self.gradientLevels
        if levels < 1:
            logger.warning(f"gradientLevels must be at least 1, using {defaults.gradientLevels}")
            levels = defaults.gradientLevels

        return GradientColorMapper(levels, oldest, newest)


# Initialize default prefs.
# The app should load the user's prefs with prefs.load().
prefs = Prefs()
