# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import get_defaults_for_argparse, build_config, entrypoint_configurables
from .diffing.config import DiffConfig, DiffFormat
from .log import init_logging, set_treediff_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_treediff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_treediff_log_level(level, True)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        json.dump({header: config}, sys.stderr, indent=2, sort_keys=True)
        sys.stderr.write('\n')
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all treediff commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for normalizing and rendering diffs.
    """
    parser.add_argument(
        '--format',
        default=DiffFormat.UNIFIED,
        choices=DiffFormat.ALL,
        help="output format of the diff.")
    parser.add_argument(
        '-o', '--output',
        default=None,
        choices=DiffFormat.ALL,
        help="output format, overrides --format.")
    parser.add_argument(
        '--side-by-side',
        action='store_true',
        default=False,
        help="show a side-by-side comparison, overrides --format and --output.")
    parser.add_argument(
        '--semantic',
        action='store_true',
        default=False,
        help="print a semantic report, overrides all other format options.")
    parser.add_argument(
        '--ignore-metadata',
        action='store_true',
        default=False,
        help="ignore metadata fields such as timestamps and versions.")
    parser.add_argument(
        '--ignore-order',
        action='store_true',
        default=False,
        help="ignore the order of list items keyed by id, name or key.")
    parser.add_argument(
        '--context',
        dest='context_lines',
        type=int,
        default=3,
        help="number of context lines.")
    parser.add_argument(
        '--color',
        dest='colorize',
        action='store_true',
        default=False,
        help="colorize the output.")


def resolve_format(args):
    """Pick the output format from the possibly conflicting format options."""
    fmt = args.format
    if getattr(args, 'output', None):
        fmt = args.output
    if getattr(args, 'side_by_side', False):
        fmt = DiffFormat.SIDE_BY_SIDE
    if args.semantic:
        fmt = DiffFormat.SEMANTIC
    return fmt


def diff_config_from_args(args):
    """Create a DiffConfig from parsed arguments."""
    return DiffConfig(
        format=resolve_format(args),
        ignore_metadata=args.ignore_metadata,
        ignore_order=args.ignore_order,
        context_lines=args.context_lines,
        colorize=args.colorize,
        semantic=args.semantic,
    )
