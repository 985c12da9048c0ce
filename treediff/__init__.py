# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, normalize, summarize, DiffConfig, DiffFormat
from .differ import Differ, compare, compare_files
from .diff_format import ChangeOp, ImpactLevel, DiffResult, DiffSummary
from .log import TreeDiffFormatError, DiffFormattingError, DocumentLoadError


__all__ = [
    "__version__",
    "diff", "normalize", "summarize",
    "Differ", "DiffConfig", "DiffFormat",
    "compare", "compare_files",
    "ChangeOp", "ImpactLevel", "DiffResult", "DiffSummary",
    "TreeDiffFormatError", "DiffFormattingError", "DocumentLoadError",
    ]
