# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from ..diff_format import op_add, op_remove, op_replace, validate_changes

__all__ = ["diff"]


def _numbers_as_float(value):
    # JSON has a single number type, so 1 and 1.0 must serialize alike
    if isinstance(value, dict):
        if not all(isinstance(k, str) for k in value):
            # json would merge 1 and "1"
            raise TypeError("mapping keys must be strings to serialize losslessly")
        return {k: _numbers_as_float(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [_numbers_as_float(v) for v in value]
    elif isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


def canonical(value):
    "Serialize value to a canonical json string."
    return json.dumps(_numbers_as_float(value), sort_keys=True,
                      separators=(",", ":"), ensure_ascii=False)


def values_equal(a, b):
    "Structural equality of two tree values."
    if a is b:
        return True
    try:
        return canonical(a) == canonical(b)
    except (TypeError, ValueError, OverflowError):
        # Not serializable, plain python equality is the best we can do
        return a == b


def join_key(path, key):
    "Path of mapping entry key below path."
    if not path:
        return str(key)
    return "%s.%s" % (path, key)


def join_index(path, index):
    "Path of sequence item index below path."
    return "%s[%d]" % (path, index)


def diff(a, b, path=""):
    """Compute the changes between two json-like values.

    Returns a list of change records, addressed by dotted/bracketed
    paths relative to `path`. Dicts are compared key by key, lists
    position by position, and anything else is replaced as a whole.
    """
    changes = _diff(a, b, path)

    # We can turn this off for performance after the library has been well tested:
    validate_changes(changes)

    return changes


def _diff(a, b, path):
    # Checked before dispatch, equal subtrees are never walked
    if values_equal(a, b):
        return []

    if isinstance(a, dict) and isinstance(b, dict):
        return diff_dicts(a, b, path=path)
    elif isinstance(a, list) and isinstance(b, list):
        return diff_lists(a, b, path=path)
    return [op_replace(path, a, b)]


def diff_dicts(a, b, path=""):
    """Compute changes between two dicts.

    Every key in either dict is visited once, in sorted order.
    Keys only in b are added, keys only in a are removed,
    and values under shared keys are diffed recursively.
    """
    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to diff_dicts need to be dicts, got %r and %r' % (a, b))

    changes = []
    # Sorting keys to get a deterministic diff result
    for key in sorted(set(a) | set(b), key=str):
        subpath = join_key(path, key)
        if key not in a:
            changes.append(op_add(subpath, b[key]))
        elif key not in b:
            changes.append(op_remove(subpath, a[key]))
        else:
            changes.extend(_diff(a[key], b[key], subpath))
    return changes


def diff_lists(a, b, path=""):
    """Compute changes between two lists, position by position.

    No alignment is attempted: an item inserted at the front shows
    up as a replace of every following item plus an add at the end.
    """
    if not isinstance(a, list) or not isinstance(b, list):
        raise TypeError('Arguments to diff_lists need to be lists, got %r and %r' % (a, b))

    changes = []
    for i in range(max(len(a), len(b))):
        subpath = join_index(path, i)
        if i >= len(a):
            changes.append(op_add(subpath, b[i]))
        elif i >= len(b):
            changes.append(op_remove(subpath, a[i]))
        else:
            changes.extend(_diff(a[i], b[i], subpath))
    return changes
