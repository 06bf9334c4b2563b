# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator
from typing import TYPE_CHECKING

import pytest
from pytestqt.qtbot import QtBot

from gitannotate.application import AnnotateApplication

if TYPE_CHECKING:
    # For '-> SourceWindow' type annotation, without pulling in SourceWindow in the actual fixture
    from gitannotate.sourcewindow import SourceWindow


@pytest.fixture(scope='session', autouse=True)
def maskHostGitConfig():
    """
    Prevent vanilla git from reading the host system's config files
    (e.g. blame.ignoreRevsFile, blame.date) during unit tests.
    """
    os.environ["GIT_CONFIG_NOSYSTEM"] = "1"
    os.environ["GIT_CONFIG_GLOBAL"] = os.devnull


@pytest.fixture(scope='session', autouse=True)
def setUpLogging():
    rootLogger = logging.root
    rootLogger.setLevel(logging.DEBUG)

    yield

    # Chatty destructors may cause spam after pytest has wound down.
    # Work around https://github.com/pytest-dev/pytest/issues/5502
    for handler in rootLogger.handlers:
        rootLogger.removeHandler(handler)


@pytest.fixture(scope="session")
def qapp_args():
    mainPyPath = os.path.join(os.path.dirname(__file__), "..", "gitannotate", "__main__.py")
    mainPyPath = os.path.normpath(mainPyPath)
    return [mainPyPath]


@pytest.fixture(scope="session")
def qapp_cls():
    yield AnnotateApplication


@pytest.fixture
def tempDir() -> Generator[tempfile.TemporaryDirectory, None, None]:
    td = tempfile.TemporaryDirectory(prefix="gitannotatetest-")
    yield td
    td.cleanup()


@pytest.fixture
def sourceWindow(request, qtbot: QtBot) -> Generator[SourceWindow, None, None]:
    from gitannotate import qt
    from gitannotate.appconsts import APP_TESTMODE
    from gitannotate.sourceview import AnnotationPane

    # Turn on test mode: Prevent loading/saving prefs
    assert APP_TESTMODE

    failCount = request.session.testsfailed

    # Prevent unit tests from reading actual user settings.
    qt.QStandardPaths.setTestModeEnabled(True)

    app = AnnotateApplication.instance()
    app.beginSession(bootUi=False)

    window = app.newWindow()
    window.show()
    qtbot.waitExposed(window)

    yield window

    # Look for message boxes that the test didn't dismiss
    leakedBoxes = [qmb.text() for qmb in window.findChildren(qt.QMessageBox) if qmb.isVisible()]

    window.close()
    qtbot.waitUntil(lambda: window not in app.windows)

    app.endSession()

    # Skip cleanup asserts if the test itself failed
    if request.session.testsfailed > failCount:
        return

    assert not leakedBoxes, f"Unit test has leaked {len(leakedBoxes)} message boxes: {'; '.join(leakedBoxes)}"
    assert not any(isinstance(w, AnnotationPane) for w in app.topLevelWidgets()), \
        "Unit test has leaked an annotation pane"
