# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Parser for the output of `git blame --line-porcelain`.

Every line of the annotated file is preceded by a full header block:

    <commit> <orig line> <final line> [<lines in group>]
    author <name>
    author-mail <<email>>
    author-time <unix seconds>
    author-tz <offset>
    committer ...
    summary <first line of commit message>
    filename <path>
    <TAB><line contents>
"""

import logging
import re
from collections.abc import Generator, Iterable

from gitannotate.blame.annotation import Annotation, BlameHeaderBlock
from gitannotate.toolbox.benchmark import benchmark

logger = logging.getLogger(__name__)

_introducerPattern = re.compile(r"^([0-9a-f]{40}|[0-9a-f]{64}) \d+ \d+( \d+)?$")
_authorTimePattern = re.compile(r"^author-time (\d+)$")
_authorMailPattern = re.compile(r"^author-mail <(.*)>$")


def iterateBlameBlocks(
        lines: Iterable[str],
        withAuthorMail: bool = False
) -> Generator[BlameHeaderBlock, None, None]:
    """
    Yield one BlameHeaderBlock per source line.

    A block is complete once its TAB-prefixed content line shows up.
    If a new introducer line arrives before that, or if the stream ends
    mid-block, the pending block is yielded as-is so that no source line
    goes missing. Yielded blocks may therefore be incomplete (not `ready`).

    The same BlameHeaderBlock instance is recycled between yields.
    """

    header = BlameHeaderBlock()

    for line in lines:
        line = line.rstrip("\r\n")

        if line.startswith("\t"):
            if header.started:
                yield header
                header.reset()
            else:
                logger.debug("Ignoring content line outside of a header block")
            continue

        if _introducerPattern.match(line):
            if header.started:
                # Previous block never got its content line
                yield header
                header.reset()
            header.commitId = line.split(" ", 1)[0]
        elif line.startswith("author "):
            header.author = line.removeprefix("author ")
        elif line.startswith("author-time "):
            match = _authorTimePattern.match(line)
            if match:
                header.authorTime = int(match.group(1))
            else:
                logger.debug(f"Unreadable author-time: {line}")
        elif withAuthorMail and line.startswith("author-mail "):
            match = _authorMailPattern.match(line)
            if match:
                header.authorMail = match.group(1)
        else:
            # Ignore committer, summary, filename, etc.
            pass

    if header.started:
        yield header


@benchmark
def parseBlameReport(lines: Iterable[str], withAuthorMail: bool = False) -> list[Annotation]:
    """
    Turn the lines of a porcelain blame report into one Annotation per line
    of the annotated file, in file order.

    Header blocks missing an author or an author-time produce a placeholder
    annotation (empty author, time 0) instead of being dropped, so the
    result always lines up with the annotated file.
    """

    annotations = []
    numPlaceholders = 0

    for header in iterateBlameBlocks(lines, withAuthorMail):
        lineIndex = len(annotations)
        if header.ready:
            annotation = Annotation.fromHeader(lineIndex, header)
        else:
            annotation = Annotation.makePlaceholder(lineIndex)
            numPlaceholders += 1
        annotations.append(annotation)

    if numPlaceholders:
        logger.warning(f"Blame report has {numPlaceholders} incomplete header block(s); "
                       f"using placeholder annotations")

    return annotations


def splitGitOutput(text: str) -> list[str]:
    """
    Split git output into lines at line feeds only. Unlike str.splitlines(), this
    leaves form feeds, U+2028 and friends inside source lines alone.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parseBlameText(text: str, withAuthorMail: bool = False) -> list[Annotation]:
    return parseBlameReport(splitGitOutput(text), withAuthorMail)
