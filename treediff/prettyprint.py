# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import io
import json

import colorama

from .diff_format import ChangeOp
from .diffing.config import DiffConfig, DiffFormat


# Total line width of the side-by-side format
SIDE_BY_SIDE_WIDTH = 120

# Separator between the two side-by-side columns
COLUMN_SEP = " | "

ELLIPSIS = "..."


ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = colorama.Fore.RED,
        ADD    = colorama.Fore.GREEN,
        INFO   = colorama.Style.BRIGHT,
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '',
        ADD    = '',
        INFO   = '',
        RESET  = '',
    )
}


def format_number(v):
    # Integral floats print like the json integers they came from
    if isinstance(v, float) and v.is_integer() and abs(v) < 1e21:
        return "%d" % v
    return repr(v)


def format_value(v):
    """Format a tree value for a single line of output.

    Strings are quoted, dicts and lists become compact json,
    and scalars use their json spelling.
    """
    if isinstance(v, str):
        return json.dumps(v, ensure_ascii=False)
    elif isinstance(v, (dict, list)):
        try:
            return json.dumps(v, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError):
            return str(v)
    elif v is None:
        return "null"
    elif isinstance(v, bool):
        return "true" if v else "false"
    elif isinstance(v, (int, float)):
        return format_number(v)
    return str(v)


def format_path_value(path, v):
    return "%s: %s" % (path, format_value(v))


def truncate(s, maxlen):
    "Cut s down to maxlen characters, marking the cut with an ellipsis."
    if len(s) <= maxlen:
        return s
    if maxlen < len(ELLIPSIS):
        return s[:maxlen]
    return s[:maxlen - len(ELLIPSIS)] + ELLIPSIS


def json_pointer(path):
    "Turn a dotted change path into a slash delimited pointer."
    return "/" + path.replace(".", "/")


class Formatter(object):
    """Base class of diff result renderers.

    Subclasses implement format_changes, which is only called
    when the result has changes. Otherwise no_changes is returned.
    """

    name = None
    no_changes = ""

    def format(self, result):
        if not result.has_changes:
            return self.no_changes
        return self.format_changes(result)

    def format_changes(self, result):
        raise NotImplementedError


class UnifiedFormatter(Formatter):
    """Diff-like output, one -/+ line per old/new value."""

    name = DiffFormat.UNIFIED

    def __init__(self, context_lines=3, colorize=False):
        # Accepted for interface compatibility, values are single lines
        self.context_lines = context_lines
        self.colorize = colorize

    def format_changes(self, result):
        c = col_const[self.colorize]
        out = io.StringIO()
        out.write("%s--- %s%s\n" % (c.INFO, result.left_label, c.RESET))
        out.write("%s+++ %s%s\n" % (c.INFO, result.right_label, c.RESET))
        for change in result.changes:
            if change.op in (ChangeOp.REMOVE, ChangeOp.REPLACE):
                out.write("%s- %s%s\n" % (
                    c.REMOVE, format_path_value(change.path, change.old_value), c.RESET))
            if change.op in (ChangeOp.ADD, ChangeOp.REPLACE):
                out.write("%s+ %s%s\n" % (
                    c.ADD, format_path_value(change.path, change.new_value), c.RESET))
        return out.getvalue()


class SideBySideFormatter(Formatter):
    """Two column output, left document on the left."""

    name = DiffFormat.SIDE_BY_SIDE

    def __init__(self, width=SIDE_BY_SIDE_WIDTH, colorize=False):
        self.width = width
        self.colorize = colorize

    @property
    def column_width(self):
        return self.width // 2

    @property
    def cell_width(self):
        return self.column_width - len(COLUMN_SEP)

    def format_row(self, left, right, left_color='', right_color=''):
        reset = col_const[self.colorize].RESET
        n = self.cell_width
        left = "%-*s" % (n, truncate(left, n))
        right = truncate(right, n)
        if left_color:
            left = left_color + left + reset
        if right_color and right:
            right = right_color + right + reset
        return left + COLUMN_SEP + right + "\n"

    def format_changes(self, result):
        c = col_const[self.colorize]
        out = io.StringIO()
        out.write("%-*s%s%s\n" % (
            self.cell_width, result.left_label, COLUMN_SEP, result.right_label))
        rule = "-" * (self.column_width - 1)
        out.write(rule + "|" + rule + "\n")
        for change in result.changes:
            left = right = ""
            if change.op in (ChangeOp.REMOVE, ChangeOp.REPLACE):
                left = format_path_value(change.path, change.old_value)
            if change.op in (ChangeOp.ADD, ChangeOp.REPLACE):
                right = format_path_value(change.path, change.new_value)
            out.write(self.format_row(
                left, right,
                left_color=c.REMOVE if left else '',
                right_color=c.ADD))
        return out.getvalue()


class JSONPatchFormatter(Formatter):
    """A json array of {op, path, value} objects.

    Resembles RFC 6902 but is not a conforming patch: dots in keys
    are not escaped and list indices become plain path segments.
    """

    name = DiffFormat.JSON_PATCH
    no_changes = "[]"

    def format_changes(self, result):
        patch = []
        for change in result.changes:
            entry = {
                "op": change.op,
                "path": json_pointer(change.path),
            }
            if change.op != ChangeOp.REMOVE:
                entry["value"] = change.new_value
            patch.append(entry)
        # Serialization errors propagate, there is no partial patch
        return json.dumps(patch, indent=2, sort_keys=True,
                          ensure_ascii=False, allow_nan=False)


class SemanticFormatter(Formatter):
    """Prose report with a closing summary and impact level."""

    name = DiffFormat.SEMANTIC
    no_changes = "No changes detected\n"

    markers = {
        ChangeOp.ADD: "+",
        ChangeOp.REMOVE: "-",
        ChangeOp.REPLACE: "~",
    }

    def format_change(self, change):
        marker = self.markers[change.op]
        if change.op == ChangeOp.ADD:
            text = format_path_value(change.path, change.new_value)
        elif change.op == ChangeOp.REMOVE:
            text = format_path_value(change.path, change.old_value)
        else:
            text = "%s: %s → %s" % (
                change.path, format_value(change.old_value), format_value(change.new_value))
        return "  %s %s\n" % (marker, text)

    def format_changes(self, result):
        out = io.StringIO()
        out.write("Comparing: %s vs %s\n\n" % (result.left_label, result.right_label))
        out.write("Changes:\n")
        for change in result.changes:
            out.write(self.format_change(change))
        s = result.summary
        out.write("\nSummary: %d modified, %d added, %d removed\n" % (
            s.modified, s.added, s.removed))
        out.write("Impact: %s\n" % (s.impact,))
        return out.getvalue()


def get_formatter(config=None):
    "Create the formatter selected by a DiffConfig."
    if config is None:
        config = DiffConfig()
    fmt = config.effective_format
    if fmt == DiffFormat.SEMANTIC:
        return SemanticFormatter()
    elif fmt == DiffFormat.SIDE_BY_SIDE:
        return SideBySideFormatter(colorize=config.colorize)
    elif fmt == DiffFormat.JSON_PATCH:
        return JSONPatchFormatter()
    return UnifiedFormatter(context_lines=config.context_lines, colorize=config.colorize)
