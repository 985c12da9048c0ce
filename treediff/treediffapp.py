# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .args import (
    add_generic_args, add_diff_args, diff_config_from_args, ConfigBackedParser,
    )
from .differ import Differ
from .log import DiffFormattingError, DocumentLoadError, error
from .utils import STDIN_FILE, setup_std_streams


_description = "Compare two JSON or YAML documents structurally."

# Exit codes
EXIT_NO_CHANGES = 0
EXIT_CHANGES = 1
EXIT_ERROR = 2


def main_diff(args):
    """Main handler of diff CLI"""
    if args.left == STDIN_FILE and args.right == STDIN_FILE:
        error("cannot read both documents from standard input")
        return EXIT_ERROR

    try:
        config = diff_config_from_args(args)
        result = Differ(config).compare_files(args.left, args.right)
    except (DocumentLoadError, DiffFormattingError, ValueError) as e:
        error("%s", e)
        return EXIT_ERROR

    if not args.quiet and result.patch:
        out = sys.stdout
        out.write(result.patch)
        if not result.patch.endswith("\n"):
            out.write("\n")

    return EXIT_CHANGES if result.has_changes else EXIT_NO_CHANGES


def _build_arg_parser(prog=None):
    """Creates an argument parser for the treediff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)

    parser.add_argument(
        "left", help="the left (old) document, or '-' for standard input.")
    parser.add_argument(
        "right", help="the right (new) document, or '-' for standard input.")
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        default=False,
        help="print nothing, only report differences in the exit code.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser(prog='treediff').parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
