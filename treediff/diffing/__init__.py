# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff
from .normalization import normalize
from .summary import summarize
from .config import DiffConfig, DiffFormat

__all__ = ["diff", "normalize", "summarize", "DiffConfig", "DiffFormat"]
