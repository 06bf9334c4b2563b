# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from gitannotate.host import AnnotateHost, Subscription, ViewHandle

logger = logging.getLogger(__name__)


class ScrollSyncCoordinator:
    """
    Keeps the top line of a secondary view equal to the top line of a
    primary view.

    Idle until start() is called. While active, every scroll notification
    from the primary view copies its top line over to the secondary view.
    Goes back to idle on stop(), or on its own as soon as either view is
    found to be gone.
    """

    host: AnnotateHost
    primary: ViewHandle | None
    secondary: ViewHandle | None
    subscription: Subscription | None

    def __init__(self, host: AnnotateHost):
        self.host = host
        self.primary = None
        self.secondary = None
        self.subscription = None

    @property
    def isActive(self) -> bool:
        return self.subscription is not None

    def start(self, primary: ViewHandle, secondary: ViewHandle):
        # Never leave an older listener running
        self.stop()

        if primary is secondary:
            raise ValueError("a view can't be synced with itself")
        self.primary = primary
        self.secondary = secondary
        self.subscription = self.host.subscribeScroll(primary, self.onScrollNotification)

        # Line up right away, without waiting for the user to scroll
        self.sync()

    def onScrollNotification(self, view: ViewHandle):
        if view is not self.primary:
            return
        self.sync()

    def sync(self) -> bool:
        """
        Copy the primary view's top line to the secondary view.
        Return False (and tear down) if either view is gone.
        """
        if not self.isActive:
            return False

        if not (self.host.isViewAlive(self.primary) and self.host.isViewAlive(self.secondary)):
            logger.debug("View went away, stopping scroll sync")
            self._teardown()
            return False

        topLine = self.host.topLine(self.primary)
        self.host.setTopLine(self.secondary, topLine)
        return True

    def stop(self, closeSecondary: bool = True):
        if not self.isActive:
            return

        secondary = self.secondary
        self._teardown()

        if closeSecondary and self.host.isViewAlive(secondary):
            self.host.closePane(secondary)

    def _teardown(self):
        subscription = self.subscription
        self.subscription = None
        self.primary = None
        self.secondary = None
        if subscription is not None:
            subscription.cancel()
