# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class TreeDiffFormatError(ValueError):
    pass


class DiffFormattingError(RuntimeError):
    """A formatter could not render a diff result."""

    def __init__(self, message, formatter=None):
        super(DiffFormattingError, self).__init__(message)
        self.formatter = formatter


class DocumentLoadError(RuntimeError):
    """One side of a file comparison could not be read or parsed."""

    def __init__(self, message, side=None, path=None):
        super(DocumentLoadError, self).__init__(message)
        self.side = side
        self.path = path


def init_logging(level=logging.INFO):
    """Sets up logging for treediff entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all treediff loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_treediff_log_level(level, set_main=True):
    """Set a log level for treediff loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('treediff')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
