# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .log import TreeDiffFormatError


class DiffEntry(dict):
    """For internal usage in treediff library.

    Minimal class providing attribute access to change record keys.
    Being a plain dict underneath, a change list can be passed
    straight to json.dumps.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


# A single path-addressed edit
Change = DiffEntry


class ChangeOp:
    "Collection of valid values for the op field in change records."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"

    ALL = (ADD, REMOVE, REPLACE)


def _with_context(entry, context):
    if context is not None:
        entry["context"] = list(context)
    return entry


def op_add(path, value, context=None):
    "Create a change record adding value at path."
    return _with_context(Change(path=path, op=ChangeOp.ADD, new_value=value), context)

def op_remove(path, value, context=None):
    "Create a change record removing value found at path."
    return _with_context(Change(path=path, op=ChangeOp.REMOVE, old_value=value), context)

def op_replace(path, old_value, new_value, context=None):
    "Create a change record replacing old_value at path with new_value."
    return _with_context(
        Change(path=path, op=ChangeOp.REPLACE, old_value=old_value, new_value=new_value),
        context)


class ImpactLevel:
    "Coarse severity labels, in increasing order."
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    # Part of the vocabulary, never produced by summarize()
    CRITICAL = "critical"

    ORDER = (LOW, MEDIUM, HIGH, CRITICAL)


def impact_rank(level):
    "Return the position of level in ImpactLevel.ORDER, for comparisons."
    try:
        return ImpactLevel.ORDER.index(level)
    except ValueError:
        raise TreeDiffFormatError("Unknown impact level '{}'.".format(level))


DiffSummary = namedtuple("DiffSummary", ["added", "removed", "modified", "impact"])


_DiffResultBase = namedtuple("DiffResult", [
    "has_changes",
    "changes",
    "summary",
    "patch",
    "left_label",
    "right_label",
    ])


class DiffResult(_DiffResultBase):
    """Outcome of one comparison.

    `changes` are in the order they were found by the tree walk,
    `patch` is the text rendered by the selected formatter.
    """
    __slots__ = ()

    def to_dict(self):
        return {
            "hasChanges": self.has_changes,
            "changes": [dict(c) for c in self.changes],
            "summary": self.summary._asdict(),
            "patch": self.patch,
            "leftLabel": self.left_label,
            "rightLabel": self.right_label,
        }


def is_valid_changes(changes):
    """Checks whether a change list is well formed.

    Returns a boolean indicating the well-formedness of the list.
    """
    try:
        validate_changes(changes)
    except TreeDiffFormatError:
        return False
    return True


def validate_changes(changes):
    """Check whether a change list is well formed.

    Raises a TreeDiffFormatError if not well formed.
    """
    if not isinstance(changes, list):
        raise TreeDiffFormatError("Change list must be a list.")
    for c in changes:
        validate_change(c)


def validate_change(c):
    """Check that c is a well formed change record.

    Raises a TreeDiffFormatError if not well formed.
    """
    if not isinstance(c, DiffEntry):
        raise TreeDiffFormatError("Change '{}' is not a diff entry.".format(c))
    if not isinstance(c.get("path"), str):
        raise TreeDiffFormatError(
            "Change path must be a string, not '{}'.".format(c.get("path")))

    op = c.get("op")
    if op == ChangeOp.ADD:
        if "old_value" in c:
            raise TreeDiffFormatError("add change at '{}' carries an old value.".format(c.path))
        if "new_value" not in c:
            raise TreeDiffFormatError("add change at '{}' has no new value.".format(c.path))
    elif op == ChangeOp.REMOVE:
        if "new_value" in c:
            raise TreeDiffFormatError("remove change at '{}' carries a new value.".format(c.path))
        if "old_value" not in c:
            raise TreeDiffFormatError("remove change at '{}' has no old value.".format(c.path))
    elif op == ChangeOp.REPLACE:
        if "old_value" not in c or "new_value" not in c:
            raise TreeDiffFormatError(
                "replace change at '{}' needs both old and new value.".format(c.path))
    else:
        raise TreeDiffFormatError("Unknown change op '{}'.".format(op))
