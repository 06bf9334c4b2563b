# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from collections.abc import Callable

from gitannotate.qt import *

ShortcutKeys = QKeySequence | QKeySequence.StandardKey | str


def makeWidgetShortcut(
        parent: QWidget,
        callback: Callable,
        *keys: ShortcutKeys,
        context=Qt.ShortcutContext.WidgetShortcut
) -> QShortcut:
    assert keys, "no shortcut keys given"
    shortcut = QShortcut(parent)
    shortcut.setKeys([QKeySequence(k) for k in keys])
    shortcut.setContext(context)
    shortcut.activated.connect(callback)
    return shortcut


def textColorFor(background: QColor) -> QColor:
    """ Black or white, whichever reads better on top of `background`. """
    return QColor(Qt.GlobalColor.black) if background.lightnessF() > .5 else QColor(Qt.GlobalColor.white)
