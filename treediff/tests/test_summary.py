# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import itertools

import pytest

from treediff import summarize, diff
from treediff.diff_format import (
    op_add, op_remove, op_replace, ImpactLevel, impact_rank, TreeDiffFormatError,
)
from treediff.diffing.summary import classify_impact


def _changes(added=0, removed=0, modified=0):
    return (
        [op_add("a%d" % i, i) for i in range(added)] +
        [op_remove("r%d" % i, i) for i in range(removed)] +
        [op_replace("m%d" % i, i, i + 1) for i in range(modified)]
    )


def test_summarize_empty():
    s = summarize([])
    assert (s.added, s.removed, s.modified) == (0, 0, 0)
    assert s.impact == ImpactLevel.LOW


def test_summarize_mixed_changes():
    s = summarize(_changes(added=2, removed=1, modified=3))
    assert (s.added, s.removed, s.modified) == (2, 1, 3)
    assert s.impact == ImpactLevel.MEDIUM


@pytest.mark.parametrize("added,removed,modified,expected", [
    (0, 0, 0, ImpactLevel.LOW),
    (2, 0, 3, ImpactLevel.LOW),
    (5, 0, 5, ImpactLevel.LOW),
    (5, 1, 5, ImpactLevel.MEDIUM),
    (6, 0, 5, ImpactLevel.MEDIUM),
    (0, 5, 0, ImpactLevel.MEDIUM),
    (0, 6, 0, ImpactLevel.HIGH),
    (2, 8, 2, ImpactLevel.HIGH),
    (10, 6, 10, ImpactLevel.HIGH),
    (20, 0, 0, ImpactLevel.MEDIUM),
    # Above twenty changes, high wins although medium also matches
    (21, 0, 0, ImpactLevel.HIGH),
    (0, 0, 21, ImpactLevel.HIGH),
])
def test_classify_impact(added, removed, modified, expected):
    assert classify_impact(added, removed, modified) == expected


def test_critical_is_never_produced():
    for added, removed, modified in itertools.product((0, 3, 30), repeat=3):
        assert classify_impact(added, removed, modified) != ImpactLevel.CRITICAL


def test_impact_monotonic_in_removed():
    for added, modified in itertools.product(range(0, 25, 4), repeat=2):
        ranks = [impact_rank(classify_impact(added, removed, modified))
                 for removed in range(12)]
        assert ranks == sorted(ranks)


def test_impact_rank_order():
    assert [impact_rank(level) for level in (
        ImpactLevel.LOW, ImpactLevel.MEDIUM, ImpactLevel.HIGH, ImpactLevel.CRITICAL,
    )] == [0, 1, 2, 3]
    with pytest.raises(TreeDiffFormatError):
        impact_rank("severe")


def test_summary_counts_add_up():
    a = {"x": [1, 2, 3], "y": {"k": 1}, "gone": True}
    b = {"x": [1, 5], "y": {"k": 2, "n": None}, "new": "v"}
    changes = diff(a, b)
    s = summarize(changes)
    assert s.added + s.removed + s.modified == len(changes)
    assert (s.added, s.removed, s.modified) == (2, 2, 2)
