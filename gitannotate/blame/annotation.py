# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import dataclasses
from datetime import datetime

DATE_LABEL_FORMAT = "%y/%m/%d"

UNCOMMITTED_COMMIT_ID = "0" * 40
"Commit id that git blame reports for lines that aren't committed yet"


def formatDateLabel(authorTime: int) -> str:
    if authorTime <= 0:
        return ""
    return datetime.fromtimestamp(authorTime).strftime(DATE_LABEL_FORMAT)


@dataclasses.dataclass
class BlameHeaderBlock:
    """
    Metadata gathered from the header lines that precede one source line
    in a porcelain blame report.
    """

    commitId: str = ""
    author: str | None = None
    authorTime: int | None = None
    authorMail: str | None = None

    @property
    def ready(self) -> bool:
        return self.author is not None and self.authorTime is not None

    @property
    def started(self) -> bool:
        return bool(self.commitId) or self.author is not None or self.authorTime is not None

    @property
    def uncommitted(self) -> bool:
        return self.commitId == UNCOMMITTED_COMMIT_ID

    def reset(self):
        self.commitId = ""
        self.author = None
        self.authorTime = None
        self.authorMail = None


@dataclasses.dataclass
class Annotation:
    lineIndex: int
    author: str
    authorTime: int
    dateLabel: str = ""
    colorBucket: int | None = None
    authorMail: str | None = None
    placeholder: bool = False

    @staticmethod
    def fromHeader(lineIndex: int, header: BlameHeaderBlock) -> Annotation:
        assert header.ready
        # git stamps uncommitted lines with the current time; we want them colorless
        authorTime = 0 if header.uncommitted else header.authorTime
        return Annotation(
            lineIndex=lineIndex,
            author=header.author,
            authorTime=authorTime,
            dateLabel=formatDateLabel(authorTime),
            authorMail=header.authorMail)

    @staticmethod
    def makePlaceholder(lineIndex: int) -> Annotation:
        return Annotation(lineIndex=lineIndex, author="", authorTime=0, placeholder=True)

    @property
    def uncommitted(self) -> bool:
        return self.authorTime == 0

    @property
    def label(self) -> str:
        parts = [self.dateLabel, self.author]
        if self.authorMail:
            parts.append(f"<{self.authorMail}>")
        return " ".join(p for p in parts if p)
