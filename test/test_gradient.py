# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import random

from gitannotate.blame import *
from .util import *


def annotationsAt(*timestamps: int) -> list[Annotation]:
    return [Annotation(lineIndex=i, author="x", authorTime=t) for i, t in enumerate(timestamps)]


def testThreeTimestampsSpanTheGradient():
    annotations = annotationsAt(100, 200, 300)
    GradientColorMapper(10).assignBuckets(annotations)
    assert [a.colorBucket for a in annotations] == [1, 5, 10]


def testUncommittedLineHasNoBucket():
    annotations = annotationsAt(0, 50, 150)
    GradientColorMapper(10).assignBuckets(annotations)
    assert len(annotations) == 3
    assert [a.colorBucket for a in annotations] == [None, 1, 10]


def testAllEqualTimestampsGetNewestBucket():
    annotations = annotationsAt(500, 500, 0, 500)
    GradientColorMapper(7).assignBuckets(annotations)
    assert [a.colorBucket for a in annotations] == [7, 7, None, 7]


def testOnlyUncommittedLines():
    annotations = annotationsAt(0, 0)
    GradientColorMapper().assignBuckets(annotations)
    assert [a.colorBucket for a in annotations] == [None, None]
    assert GradientColorMapper.timeRange([0, 0]) == (0, 0)


def testBucketsAreMonotonicAndInRange():
    rng = random.Random(1234)
    timestamps = [rng.randint(1, 2_000_000_000) for _ in range(300)]
    mapper = GradientColorMapper(10)
    minT, maxT = mapper.timeRange(timestamps)

    ordered = sorted(timestamps)
    buckets = [mapper.bucketFor(t, minT, maxT) for t in ordered]

    assert all(1 <= b <= 10 for b in buckets)
    assert buckets == sorted(buckets)
    assert buckets[0] == 1
    assert buckets[-1] == 10


def testSingleBucket():
    mapper = GradientColorMapper(1, (0, 0, 0), (255, 255, 255))
    assert mapper.bucketFor(1, 1, 100) == 1
    assert mapper.bucketFor(100, 1, 100) == 1
    assert mapper.colorForBucket(1) == (0, 0, 0)


def testRejectsZeroBuckets():
    with pytest.raises(ValueError):
        GradientColorMapper(0)


def testDefaultGradientEndpoints():
    mapper = GradientColorMapper()
    assert mapper.numBuckets == 10
    assert mapper.hexColorForBucket(1) == "#20304f"
    assert mapper.hexColorForBucket(10) == "#3050af"


def testIntermediateColorIsFloored():
    mapper = GradientColorMapper()
    # ratio 4/9 between #20304f and #3050af
    assert mapper.colorForBucket(5) == (39, 62, 121)


def testPalette():
    palette = GradientColorMapper(4, (0, 0, 0), (31, 61, 91)).palette()
    assert palette == [(0, 0, 0), (10, 20, 30), (20, 40, 60), (31, 61, 91)]


def testHexColors():
    assert parseHexColor("#20304f") == (0x20, 0x30, 0x4f)
    assert parseHexColor("3050AF") == (0x30, 0x50, 0xaf)
    assert formatHexColor((1, 2, 255)) == "#0102ff"

    with pytest.raises(ValueError):
        parseHexColor("#fff")
    with pytest.raises(ValueError):
        parseHexColor("#gggggg")


def testColorForBucketOutOfRange():
    mapper = GradientColorMapper(10)
    assert mapper.colorForBucket(1) == DEFAULT_OLDEST_COLOR

    with pytest.raises(ValueError):
        mapper.colorForBucket(0)
    with pytest.raises(ValueError):
        mapper.colorForBucket(11)
