# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Turn `git blame --line-porcelain` output into per-line annotations
colored by commit age.

Nothing in here depends on Qt.
"""

from gitannotate.blame.annotation import (
    Annotation,
    BlameHeaderBlock,
    DATE_LABEL_FORMAT,
    UNCOMMITTED_COMMIT_ID,
    formatDateLabel,
)
from gitannotate.blame.gradient import (
    DEFAULT_NEWEST_COLOR,
    DEFAULT_NUM_BUCKETS,
    DEFAULT_OLDEST_COLOR,
    GradientColorMapper,
    Rgb,
    formatHexColor,
    parseHexColor,
)
from gitannotate.blame.parser import (
    iterateBlameBlocks,
    parseBlameReport,
    parseBlameText,
    splitGitOutput,
)
