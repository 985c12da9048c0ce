# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
from functools import cmp_to_key

from ..log import debug, warning

__all__ = ["normalize"]


# Dotted paths stripped by ignore_metadata, all rooted at the top level
METADATA_PATHS = (
    "metadata.createdAt",
    "metadata.updatedAt",
    "metadata.version",
    "metadata.modifiedBy",
    "metadata.creationTimestamp",
    "metadata.resourceVersion",
    "metadata.generation",
    "metadata.uid",
    )

# Keys identifying array items, in priority order
STABLE_KEYS = ("id", "name", "key")


def normalize(value, ignore_metadata=False, ignore_order=False):
    """Return a sanitized copy of value ready for diffing.

    The copy is made by a json round trip. Metadata fields are stripped
    if ignore_metadata is set, and arrays of keyed mappings are sorted
    if ignore_order is set.
    """
    normalized = deep_copy(value)

    if ignore_metadata:
        remove_metadata_fields(normalized)

    if ignore_order:
        sort_arrays(normalized)

    return normalized


def has_string_keys(value):
    "Whether every mapping nested in value is keyed by strings only."
    if isinstance(value, dict):
        return (all(isinstance(k, str) for k in value) and
                all(has_string_keys(v) for v in value.values()))
    elif isinstance(value, (list, tuple)):
        return all(has_string_keys(v) for v in value)
    return True


def deep_copy(value):
    """Copy value through json, or return value itself if it cannot be
    copied without loss.

    Non-string mapping keys would be stringified by json, merging
    e.g. 1 and "1", so such values are not copied either.
    """
    try:
        if not has_string_keys(value):
            raise TypeError("mapping keys must be strings")
        return json.loads(json.dumps(value))
    except (TypeError, ValueError) as e:
        warning("Could not copy value for normalization, using it as is: %s", e)
        return value


def split_path(path):
    "Split a path on the form 'foo.bar' into ['foo','bar']."
    return [x for x in path.split(".") if x]


def remove_path(data, path):
    """Delete the entry at a dotted path inside nested dicts.

    Missing keys and non-dict intermediates are ignored.
    """
    parts = split_path(path)
    if not parts:
        return
    for key in parts[:-1]:
        if not isinstance(data, dict) or key not in data:
            return
        data = data[key]
    if isinstance(data, dict):
        data.pop(parts[-1], None)


def remove_metadata_fields(data, paths=METADATA_PATHS):
    for path in paths:
        remove_path(data, path)


def visit_sequences(data, callback):
    "Call callback on every list in data, outermost first."
    if isinstance(data, dict):
        for value in data.values():
            visit_sequences(value, callback)
    elif isinstance(data, list):
        callback(data)
        for item in data:
            visit_sequences(item, callback)


def has_stable_key(seq):
    "Whether every item of seq is a dict holding at least one stable key."
    if not seq:
        return False
    for item in seq:
        if not isinstance(item, dict):
            return False
        if not any(key in item for key in STABLE_KEYS):
            return False
    return True


def _as_number(v):
    # bool is an int subclass but not a number here
    if isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        return float(v)
    return None


def _cmp(x, y):
    return (x > y) - (x < y)


def compare_values(a, b):
    "Order two stable key values: strings, then numbers, then their str() forms."
    if isinstance(a, str) and isinstance(b, str):
        return _cmp(a, b)
    an = _as_number(a)
    bn = _as_number(b)
    if an is not None and bn is not None:
        return _cmp(an, bn)
    return _cmp(str(a), str(b))


def compare_by_stable_key(x, y):
    "Compare two items by the first stable key present in both."
    for key in STABLE_KEYS:
        if key in x and key in y:
            return compare_values(x[key], y[key])
    return 0


def sort_by_key(seq):
    "Sort a list of keyed dicts in place."
    seq[:] = sorted(seq, key=cmp_to_key(compare_by_stable_key))


def sort_arrays(data):
    """Sort all lists of keyed dicts found in data, in place.

    Lists with any item lacking a stable key keep their order,
    as their order may well be meaningful.
    """
    def _sort_if_keyed(seq):
        if has_stable_key(seq):
            sort_by_key(seq)
        elif seq:
            debug("Keeping order of list with %d items lacking stable keys", len(seq))
    visit_sequences(data, _sort_if_keyed)
