# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from treediff import diff
from treediff.diff_format import ChangeOp, is_valid_changes


def changes_by_path(changes):
    return {c.path: c for c in changes}


def check_diff_inverse(a, b):
    "Check that every add in diff(a, b) is a remove in diff(b, a) and vice versa."
    forward = changes_by_path(diff(a, b))
    backward = changes_by_path(diff(b, a))
    assert is_valid_changes(list(forward.values()))
    assert is_valid_changes(list(backward.values()))
    assert set(forward) == set(backward)
    for path, c in forward.items():
        r = backward[path]
        if c.op == ChangeOp.ADD:
            assert r.op == ChangeOp.REMOVE
            assert r.old_value == c.new_value
        elif c.op == ChangeOp.REMOVE:
            assert r.op == ChangeOp.ADD
            assert r.new_value == c.old_value
        else:
            assert r.op == ChangeOp.REPLACE
            assert (r.old_value, r.new_value) == (c.new_value, c.old_value)


def check_symmetric_diff(a, b):
    "Check self-diffs are empty and diff(a, b) mirrors diff(b, a)."
    assert diff(a, a) == []
    assert diff(b, b) == []
    check_diff_inverse(a, b)
