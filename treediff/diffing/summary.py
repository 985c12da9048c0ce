# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import ChangeOp, DiffSummary, ImpactLevel

__all__ = ["summarize", "classify_impact"]


# Thresholds for impact classification
HIGH_REMOVED = 5
HIGH_TOTAL = 20
MEDIUM_TOTAL = 10


def classify_impact(added, removed, modified):
    "Derive an impact level from change counts."
    total = added + removed + modified
    if total == 0:
        return ImpactLevel.LOW
    # High must be checked first, its total threshold overlaps medium's
    if removed > HIGH_REMOVED or total > HIGH_TOTAL:
        return ImpactLevel.HIGH
    if removed > 0 or total > MEDIUM_TOTAL:
        return ImpactLevel.MEDIUM
    return ImpactLevel.LOW


def summarize(changes):
    "Count changes by op and classify their impact."
    counts = {ChangeOp.ADD: 0, ChangeOp.REMOVE: 0, ChangeOp.REPLACE: 0}
    for c in changes:
        counts[c.op] += 1
    added = counts[ChangeOp.ADD]
    removed = counts[ChangeOp.REMOVE]
    modified = counts[ChangeOp.REPLACE]
    return DiffSummary(
        added=added,
        removed=removed,
        modified=modified,
        impact=classify_impact(added, removed, modified),
    )
