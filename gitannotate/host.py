# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Everything the annotation sidebar needs from its surroundings.

The sidebar logic (parsing, coloring, scroll sync, toggling) only talks to an
AnnotateHost. View handles are opaque to it: it compares them by identity and
passes them back to the host.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from typing import Any

from gitannotate.blame import Rgb

ViewHandle = Any

ScrollCallback = Callable[[ViewHandle], None]


@dataclasses.dataclass
class BlameResult:
    lines: list[str]
    exitCode: int

    @property
    def ok(self) -> bool:
        return self.exitCode == 0 and bool(self.lines)

    @property
    def rawText(self) -> str:
        return "\n".join(self.lines)


class Subscription:
    """
    Handle on a scroll listener. The listener stays installed until cancel()
    is called. cancel() may be called any number of times.
    """

    def __init__(self, onCancel: Callable[[], None] | None = None):
        self._onCancel = onCancel
        self.active = True

    def cancel(self):
        if not self.active:
            return
        self.active = False
        onCancel, self._onCancel = self._onCancel, None
        if onCancel is not None:
            onCancel()


class AnnotateHost:
    def currentFilePath(self) -> str:
        raise NotImplementedError("override this")

    def runBlame(self, path: str) -> BlameResult:
        raise NotImplementedError("override this")

    def currentView(self) -> ViewHandle:
        raise NotImplementedError("override this")

    def focusView(self, view: ViewHandle):
        raise NotImplementedError("override this")

    def reportError(self, message: str):
        raise NotImplementedError("override this")

    # ---------------------------------------------
    # Annotation pane

    def createPane(self, primary: ViewHandle, widthColumns: int) -> ViewHandle:
        """ Create a fixed-width pane to the left of the primary view. """
        raise NotImplementedError("override this")

    def writePaneLines(self, pane: ViewHandle, lines: Sequence[str]):
        raise NotImplementedError("override this")

    def highlightPaneLines(self, pane: ViewHandle, firstLine: int, lastLine: int, color: Rgb):
        """ Paint the background of lines firstLine..lastLine (inclusive, 0-based). """
        raise NotImplementedError("override this")

    def lockPane(self, pane: ViewHandle, tag: str):
        """ Make the pane read-only and tag it so findTaggedPane can find it later. """
        raise NotImplementedError("override this")

    def findTaggedPane(self, primary: ViewHandle, tag: str) -> ViewHandle | None:
        raise NotImplementedError("override this")

    def bindPaneKeys(self, pane: ViewHandle, keys: Sequence[str], callback: Callable[[], None]):
        raise NotImplementedError("override this")

    def closePane(self, pane: ViewHandle):
        raise NotImplementedError("override this")

    # ---------------------------------------------
    # Scrolling

    def isViewAlive(self, view: ViewHandle) -> bool:
        raise NotImplementedError("override this")

    def topLine(self, view: ViewHandle) -> int:
        raise NotImplementedError("override this")

    def setTopLine(self, view: ViewHandle, line: int):
        raise NotImplementedError("override this")

    def subscribeScroll(self, view: ViewHandle, callback: ScrollCallback) -> Subscription:
        """
        Call `callback(scrolledView)` whenever `view` scrolls vertically,
        until the returned Subscription is cancelled.
        """
        raise NotImplementedError("override this")
