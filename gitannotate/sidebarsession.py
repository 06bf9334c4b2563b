# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Generator

from gitannotate.blame import Annotation, GradientColorMapper, parseBlameReport
from gitannotate.errors import AnnotateError, BlameFailedError, NoFileError, NothingToAnnotateError
from gitannotate.host import AnnotateHost, Subscription, ViewHandle
from gitannotate.scrollsync import ScrollSyncCoordinator
from gitannotate.toolbox.benchmark import Benchmark

logger = logging.getLogger(__name__)

PANE_TAG = "gitannotate"
CLOSE_KEYS = ("q", "Escape")
DEFAULT_WIDTH_COLUMNS = 30


def bucketRuns(annotations: list[Annotation]) -> Generator[tuple[int, int, int], None, None]:
    """
    Yield (firstLine, lastLine, bucket) for each run of consecutive
    annotations sharing the same color bucket. Colorless lines are skipped.
    """
    runStart = -1
    runBucket = None

    for annotation in annotations:
        bucket = annotation.colorBucket
        if bucket == runBucket and bucket is not None:
            continue
        if runBucket is not None:
            yield runStart, annotation.lineIndex - 1, runBucket
        runStart = annotation.lineIndex
        runBucket = bucket

    if runBucket is not None:
        yield runStart, annotations[-1].lineIndex, runBucket


@dataclasses.dataclass
class SidebarSession:
    """ One open-to-close lifecycle of the annotation pane. """

    primary: ViewHandle
    pane: ViewHandle
    filePath: str
    annotations: list[Annotation]
    coordinator: ScrollSyncCoordinator

    @property
    def subscription(self) -> Subscription | None:
        return self.coordinator.subscription

    def isOpen(self, host: AnnotateHost) -> bool:
        return (self.coordinator.isActive
                and self.coordinator.secondary is self.pane
                and host.isViewAlive(self.pane))


class SidebarController:
    """
    Toggles the annotation sidebar next to the host's current view.
    At most one sidebar (and one scroll subscription) is alive at a time.
    """

    host: AnnotateHost
    mapper: GradientColorMapper
    widthColumns: int
    withAuthorMail: bool
    session: SidebarSession | None

    def __init__(
            self,
            host: AnnotateHost,
            mapper: GradientColorMapper | None = None,
            widthColumns: int = DEFAULT_WIDTH_COLUMNS,
            withAuthorMail: bool = False,
    ):
        self.host = host
        self.mapper = mapper or GradientColorMapper()
        self.widthColumns = widthColumns
        self.withAuthorMail = withAuthorMail
        self.session = None

    @property
    def isOpen(self) -> bool:
        return self.session is not None and self.session.isOpen(self.host)

    def toggle(self) -> SidebarSession | None:
        # A second toggle collapses the sidebar instead of stacking another one
        if self.close():
            return None

        try:
            return self.open()
        except AnnotateError as exc:
            logger.warning(f"Sidebar not opened: {exc.text}")
            self.host.reportError(exc.fullText())
            return None

    def close(self) -> bool:
        """
        Tear down the current session (and any stray tagged pane).
        Return True if a pane was actually closed. Closing when nothing is
        open is a no-op.
        """
        closedSomething = False

        session, self.session = self.session, None
        if session is not None:
            wasOpen = session.isOpen(self.host)
            session.coordinator.stop()
            closedSomething = wasOpen

        strayPane = self.host.findTaggedPane(self.host.currentView(), PANE_TAG)
        if strayPane is not None:
            logger.debug("Closing stray annotation pane")
            self.host.closePane(strayPane)
            closedSomething = True

        return closedSomething

    def open(self) -> SidebarSession:
        self.close()

        host = self.host

        path = host.currentFilePath()
        if not path:
            raise NoFileError()

        with Benchmark("git blame") as blameTimer:
            result = host.runBlame(path)

        if result.exitCode == 0 and not result.lines:
            raise NothingToAnnotateError(path)

        if not result.ok:
            raise BlameFailedError(result.rawText, result.exitCode)

        annotations = parseBlameReport(result.lines, self.withAuthorMail)
        self.mapper.assignBuckets(annotations)

        primary = host.currentView()
        pane = host.createPane(primary, self.widthColumns)
        host.writePaneLines(pane, [a.label for a in annotations])

        for firstLine, lastLine, bucket in bucketRuns(annotations):
            host.highlightPaneLines(pane, firstLine, lastLine, self.mapper.colorForBucket(bucket))

        host.lockPane(pane, PANE_TAG)
        host.bindPaneKeys(pane, CLOSE_KEYS, self.close)

        coordinator = ScrollSyncCoordinator(host)
        coordinator.start(primary, pane)

        self.session = SidebarSession(primary, pane, path, annotations, coordinator)
        logger.info(f"Annotated {path}: {len(annotations)} lines (blame took {blameTimer.elapsedMs:.0f} ms)")

        host.focusView(primary)
        return self.session
