# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from pytest import fixture

from treediff import config as treediff_config


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty working directory with an empty home directory,
    so that no config files on the test machine are picked up.
    """
    home = tmpdir.mkdir('home')
    work = tmpdir.mkdir('work')
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.chdir(str(work))
    monkeypatch.setattr(treediff_config, '_config_cache', {})
    return str(work)


@fixture
def keyed_items():
    return [
        {"id": "1", "name": "first"},
        {"id": "2", "name": "second"},
    ]
