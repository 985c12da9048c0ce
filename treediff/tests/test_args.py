# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import os

import pytest
from traitlets import Enum

from treediff.args import (
    ConfigBackedParser, LogLevelAction, add_diff_args, resolve_format,
    diff_config_from_args,
)
from treediff.config import (
    entrypoint_configurables, Global, Diff, build_config, recursive_update,
)


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)


@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


class DiffFixtureConfig(Diff):
    pass


@pytest.fixture
def entrypoint_diff_config():
    entrypoint_configurables['test-prog'] = DiffFixtureConfig
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config, isolated_config):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'


def test_config_parser_unknown_prog_uses_argparse_defaults(isolated_config):
    parser = ConfigBackedParser('not-configured')
    add_diff_args(parser)
    arguments = parser.parse_args([])
    assert arguments.format == 'unified'
    assert arguments.context_lines == 3


def test_config_file_defaults(entrypoint_diff_config, isolated_config):
    with open(os.path.join(isolated_config, 'treediff_config.json'), 'w') as f:
        json.dump({"DiffFixtureConfig": {"ignore_order": True, "context_lines": 5}}, f)
    parser = ConfigBackedParser('test-prog')
    add_diff_args(parser)
    arguments = parser.parse_args([])
    assert arguments.ignore_order is True
    assert arguments.context_lines == 5
    assert arguments.ignore_metadata is False


def test_config_file_colorize(entrypoint_diff_config, isolated_config):
    with open(os.path.join(isolated_config, 'treediff_config.json'), 'w') as f:
        json.dump({"DiffFixtureConfig": {"colorize": True}}, f)
    parser = ConfigBackedParser('test-prog')
    add_diff_args(parser)
    assert diff_config_from_args(parser.parse_args([])).colorize


def test_config_file_in_home(isolated_config):
    home_config = os.path.join(os.path.expanduser('~'), '.treediff')
    os.makedirs(home_config)
    with open(os.path.join(home_config, 'treediff_config.json'), 'w') as f:
        json.dump({"Diff": {"ignore_metadata": True, "format": "json-patch"}}, f)
    with open(os.path.join(isolated_config, 'treediff_config.json'), 'w') as f:
        json.dump({"Diff": {"format": "semantic"}}, f)
    config = build_config('treediff')
    assert config['ignore_metadata'] is True
    # Working directory takes priority over home
    assert config['format'] == 'semantic'
    assert config['log_level'] == 'INFO'


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('no-such-entrypoint')


def test_recursive_update():
    target = {"a": {"b": 1, "c": 2}, "d": 3}
    recursive_update(target, {"a": {"b": None, "e": 5}, "d": None}, False)
    assert target == {"a": {"c": 2, "e": 5}}

    target = {"a": 1}
    recursive_update(target, {"a": None}, True)
    assert target == {"a": None}


def _parse(args):
    parser = argparse.ArgumentParser()
    add_diff_args(parser)
    return parser.parse_args(args)


@pytest.mark.parametrize("args,expected", [
    ([], 'unified'),
    (['--format', 'json-patch'], 'json-patch'),
    (['--format', 'json-patch', '-o', 'side-by-side'], 'side-by-side'),
    (['-o', 'json-patch', '--side-by-side'], 'side-by-side'),
    (['--side-by-side', '--semantic'], 'semantic'),
])
def test_resolve_format(args, expected):
    assert resolve_format(_parse(args)) == expected


def test_diff_config_from_args():
    config = diff_config_from_args(_parse(
        ['--ignore-metadata', '--ignore-order', '--context', '1', '--color']))
    assert config.format == 'unified'
    assert config.ignore_metadata
    assert config.ignore_order
    assert config.context_lines == 1
    assert config.colorize
    assert not config.semantic


def test_invalid_format_rejected():
    with pytest.raises(SystemExit):
        _parse(['--format', 'html'])
