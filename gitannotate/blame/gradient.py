# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

from __future__ import annotations

import math
from collections.abc import Iterable

from gitannotate.blame.annotation import Annotation

Rgb = tuple[int, int, int]

DEFAULT_NUM_BUCKETS = 10
DEFAULT_OLDEST_COLOR: Rgb = (0x20, 0x30, 0x4f)
DEFAULT_NEWEST_COLOR: Rgb = (0x30, 0x50, 0xaf)


def parseHexColor(text: str) -> Rgb:
    """ Parse "#rrggbb" (the leading hash is optional). """
    text = text.strip().removeprefix("#")
    if len(text) != 6:
        raise ValueError(f"not an #rrggbb color: {text}")
    value = int(text, 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def formatHexColor(rgb: Rgb) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


class GradientColorMapper:
    """
    Sorts commit timestamps into N age buckets and gives each bucket a color
    along a linear gradient from `oldestColor` (bucket 1) to `newestColor`
    (bucket N).

    Timestamps that aren't strictly positive (uncommitted lines) get no bucket.
    """

    numBuckets: int
    oldestColor: Rgb
    newestColor: Rgb

    def __init__(
            self,
            numBuckets: int = DEFAULT_NUM_BUCKETS,
            oldestColor: Rgb = DEFAULT_OLDEST_COLOR,
            newestColor: Rgb = DEFAULT_NEWEST_COLOR,
    ):
        if numBuckets < 1:
            raise ValueError(f"need at least 1 gradient bucket, got {numBuckets}")
        self.numBuckets = numBuckets
        self.oldestColor = oldestColor
        self.newestColor = newestColor

    @staticmethod
    def timeRange(timestamps: Iterable[int]) -> tuple[int, int]:
        positive = [t for t in timestamps if t > 0]
        if not positive:
            return 0, 0
        return min(positive), max(positive)

    def bucketFor(self, t: int, minT: int, maxT: int) -> int | None:
        if t <= 0:
            return None

        n = self.numBuckets
        ratio = 1.0 if maxT == minT else (t - minT) / (maxT - minT)
        bucket = math.floor(ratio * (n - 1)) + 1
        return max(1, min(n, bucket))

    def colorForBucket(self, bucket: int) -> Rgb:
        if not 1 <= bucket <= self.numBuckets:
            raise ValueError(f"bucket {bucket} out of range 1..{self.numBuckets}")

        n = self.numBuckets
        ratio = (bucket - 1) / (n - 1) if n > 1 else 0.0
        return tuple(
            math.floor(old + ratio * (new - old))
            for old, new in zip(self.oldestColor, self.newestColor, strict=True))

    def hexColorForBucket(self, bucket: int) -> str:
        return formatHexColor(self.colorForBucket(bucket))

    def palette(self) -> list[Rgb]:
        return [self.colorForBucket(i) for i in range(1, self.numBuckets + 1)]

    def assignBuckets(self, annotations: list[Annotation]):
        minT, maxT = self.timeRange(a.authorTime for a in annotations)
        for annotation in annotations:
            annotation.colorBucket = self.bucketFor(annotation.authorTime, minT, maxT)
