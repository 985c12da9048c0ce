# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import DiffResult
from .diffing.config import DiffConfig
from .diffing.generic import diff
from .diffing.normalization import normalize
from .diffing.summary import summarize
from .log import DiffFormattingError, DocumentLoadError, debug
from .prettyprint import get_formatter
from .utils import read_document

__all__ = ["Differ", "compare", "compare_files"]


class Differ(object):
    """Compare two documents and render the changes.

    Options are taken from `config`, or given as keyword
    arguments to build a DiffConfig from.
    """

    def __init__(self, config=None, **options):
        if config is None:
            config = DiffConfig(**options)
        elif options:
            raise TypeError('Pass either a config or keyword options, not both')
        self.config = config

    def compare(self, left, right, left_label="left", right_label="right"):
        """Compare two decoded tree values.

        Returns a DiffResult with the rendered patch attached.
        Raises DiffFormattingError if the changes cannot be rendered.
        """
        config = self.config
        debug("Comparing %s and %s with %r", left_label, right_label, config)

        a = normalize(left, config.ignore_metadata, config.ignore_order)
        b = normalize(right, config.ignore_metadata, config.ignore_order)

        changes = diff(a, b)
        result = DiffResult(
            has_changes=bool(changes),
            changes=changes,
            summary=summarize(changes),
            patch=None,
            left_label=left_label,
            right_label=right_label,
        )
        debug("Found %d changes, impact %s", len(changes), result.summary.impact)

        formatter = get_formatter(config)
        try:
            patch = formatter.format(result)
        except (TypeError, ValueError) as e:
            raise DiffFormattingError(
                "failed to format diff of %s and %s with the %s formatter: %s" % (
                    left_label, right_label, formatter.name, e),
                formatter=formatter.name) from e
        return result._replace(patch=patch)

    def compare_files(self, left_path, right_path):
        """Load two YAML or JSON files and compare them.

        The file paths are used as labels. Raises DocumentLoadError
        naming the side that could not be read.
        """
        left = _load_side(left_path, "left")
        right = _load_side(right_path, "right")
        return self.compare(left, right, left_path, right_path)


def _load_side(path, side):
    try:
        return read_document(path)
    except (OSError, ValueError) as e:
        raise DocumentLoadError(
            "failed to parse %s file: %s" % (side, e),
            side=side, path=path) from e


def compare(left, right, left_label="left", right_label="right", **options):
    "Compare two tree values with a Differ built from keyword options."
    return Differ(**options).compare(left, right, left_label, right_label)


def compare_files(left_path, right_path, **options):
    "Compare two YAML or JSON files with a Differ built from keyword options."
    return Differ(**options).compare_files(left_path, right_path)
