# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import os
import re
import shutil
from collections.abc import Callable, Sequence
from typing import TypeVar

import pygit2
import pytest

from gitannotate.host import AnnotateHost, BlameResult, Subscription
from . import *

TEST_SIGNATURE = pygit2.Signature("Test Person", "toto@example.com", 1672600000, 0)

requiresGit = pytest.mark.skipif(
    not shutil.which("git"),
    reason="Requires git")

_T = TypeVar("_T")


# -----------------------------------------------------------------------------
# Porcelain blame reports

def fakeCommitId(n: int) -> str:
    return f"{n:040x}"


def porcelainBlock(
        commitId: str,
        author: str | None,
        authorTime: int | None,
        content: str,
        mail: str = "",
        lineNo: int = 1,
        withContentLine: bool = True,
) -> list[str]:
    """ One header block of `git blame --line-porcelain` output. """
    lines = [f"{commitId} {lineNo} {lineNo} 1"]
    if author is not None:
        lines.append(f"author {author}")
    lines.append(f"author-mail <{mail or 'someone@example.com'}>")
    if authorTime is not None:
        lines.append(f"author-time {authorTime}")
    lines += [
        "author-tz +0000",
        f"committer {author or 'Nobody'}",
        "committer-mail <nobody@example.com>",
        f"committer-time {authorTime or 0}",
        "committer-tz +0000",
        "summary Some commit",
        "filename hello.txt",
    ]
    if withContentLine:
        lines.append("\t" + content)
    return lines


def porcelainReport(*entries: tuple[str, int]) -> list[str]:
    """ Report where line i is authored by entries[i][0] at time entries[i][1]. """
    lines = []
    for i, (author, authorTime) in enumerate(entries):
        lines += porcelainBlock(fakeCommitId(authorTime or 0), author, authorTime, f"line {i}", lineNo=i+1)
    return lines


# -----------------------------------------------------------------------------
# In-memory host

class FakeView:
    def __init__(self, name: str, primary: "FakeView | None" = None, widthColumns: int = 0):
        self.name = name
        self.primary = primary
        self.widthColumns = widthColumns
        self.topLine = 0
        self.lines = []
        self.highlights = []
        self.tag = ""
        self.keys = {}

    def __repr__(self):
        return f"FakeView({self.name})"


class FakeHost(AnnotateHost):
    """ AnnotateHost that records everything the sidebar asks of it. """

    def __init__(self, filePath="/src/hello.txt", blameResult: BlameResult | None = None):
        self.filePath = filePath
        self.blameResult = blameResult or BlameResult(porcelainReport(("Alice", 100), ("Bob", 200)), 0)
        self.primary = FakeView("primary")
        self.alive = {self.primary}
        self.panes = []
        self.closedPanes = []
        self.listeners = []
        self.errors = []
        self.focused = None
        self.blameCalls = 0

    # ---------------------------------------------
    # Test helpers

    def scroll(self, view: FakeView, line: int):
        view.topLine = line
        for listenedView, callback in list(self.listeners):
            if listenedView is view:
                callback(view)

    def kill(self, view: FakeView):
        self.alive.discard(view)

    def pressKey(self, pane: FakeView, key: str):
        pane.keys[key]()

    def alivePanes(self) -> list[FakeView]:
        return [p for p in self.panes if p in self.alive]

    # ---------------------------------------------
    # AnnotateHost

    def currentFilePath(self) -> str:
        return self.filePath

    def runBlame(self, path: str) -> BlameResult:
        self.blameCalls += 1
        return self.blameResult

    def currentView(self) -> FakeView:
        return self.primary

    def focusView(self, view: FakeView):
        self.focused = view

    def reportError(self, message: str):
        self.errors.append(message)

    def createPane(self, primary: FakeView, widthColumns: int) -> FakeView:
        pane = FakeView(f"pane{len(self.panes)}", primary, widthColumns)
        self.panes.append(pane)
        self.alive.add(pane)
        return pane

    def writePaneLines(self, pane: FakeView, lines: Sequence[str]):
        pane.lines = list(lines)

    def highlightPaneLines(self, pane: FakeView, firstLine: int, lastLine: int, color):
        pane.highlights.append((firstLine, lastLine, color))

    def lockPane(self, pane: FakeView, tag: str):
        pane.tag = tag

    def findTaggedPane(self, primary: FakeView, tag: str) -> FakeView | None:
        for pane in self.alivePanes():
            if pane.tag == tag and pane.primary is primary:
                return pane
        return None

    def bindPaneKeys(self, pane: FakeView, keys: Sequence[str], callback: Callable[[], None]):
        for key in keys:
            pane.keys[key] = callback

    def closePane(self, pane: FakeView):
        assert pane in self.alive, "closing a dead pane"
        self.alive.discard(pane)
        self.closedPanes.append(pane)

    def isViewAlive(self, view: FakeView) -> bool:
        return view in self.alive

    def topLine(self, view: FakeView) -> int:
        return view.topLine

    def setTopLine(self, view: FakeView, line: int):
        view.topLine = line

    def subscribeScroll(self, view: FakeView, callback) -> Subscription:
        entry = (view, callback)
        self.listeners.append(entry)
        return Subscription(lambda: self.listeners.remove(entry))


# -----------------------------------------------------------------------------
# Git repositories

def writeFile(path, text):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)


def makeTestRepo(parentDir: str, fileName: str, history: Sequence[tuple[int, str]]) -> str:
    """
    Create a repository where `fileName` goes through the given
    (author time, contents) versions, one commit each.
    Return the path to the file in the workdir.
    """
    workdir = os.path.join(parentDir, "repo")
    repo = pygit2.init_repository(workdir)
    filePath = os.path.join(workdir, fileName)

    try:
        for i, (authorTime, text) in enumerate(history):
            writeFile(filePath, text)
            index = repo.index
            index.add(fileName)
            index.write()
            tree = index.write_tree()

            signature = pygit2.Signature(TEST_SIGNATURE.name, TEST_SIGNATURE.email, authorTime, 0)
            parents = [] if repo.head_is_unborn else [repo.head.target]
            repo.create_commit("HEAD", signature, signature, f"Version {i + 1}", tree, parents)
    finally:
        repo.free()

    return filePath


# -----------------------------------------------------------------------------
# Qt helpers

def waitUntilTrue(
        callback: Callable[[], _T],
        timeout: int = 5000
) -> _T:
    interval = 100
    assert timeout >= interval
    for _ in range(0, timeout, interval):
        result = callback()
        if result:
            return result
        QTest.qWait(interval)
    raise TimeoutError(f"retry failed after {timeout} ms timeout")


def findQMessageBox(parent: QWidget, textPattern: str) -> QMessageBox:
    numBoxesFound = 0
    for qmb in parent.findChildren(QMessageBox):
        if not qmb.isVisibleTo(parent):  # skip zombie QMBs
            continue
        numBoxesFound += 1
        haystack = "\n".join([qmb.windowTitle(), qmb.text(), qmb.informativeText()])
        if re.search(textPattern, haystack, re.IGNORECASE | re.DOTALL):
            return qmb
    raise KeyError(f"did not find \"{textPattern}\" among {numBoxesFound} QMessageBoxes")


def rejectQMessageBox(parent: QWidget, textPattern: str):
    findQMessageBox(parent, textPattern).reject()


def annotationPanes(window: QWidget) -> list:
    from gitannotate.sourceview import AnnotationPane
    return [p for p in window.findChildren(AnnotationPane) if p.isVisibleTo(window)]
