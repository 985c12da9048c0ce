# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

import yaml

# Read from standard input instead of a file
STDIN_FILE = '-'


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain strings.

    Loaded documents then only contain json compatible values.
    """


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers
            if tag != 'tag:yaml.org,2002:timestamp']
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_document(text):
    """Parse YAML or JSON text into a tree value.

    YAML is tried first, as most JSON is also valid YAML.
    """
    try:
        return yaml.load(text, Loader=DocumentLoader)
    except yaml.YAMLError:
        pass
    try:
        return json.loads(text)
    except ValueError:
        raise ValueError("file is not valid YAML or JSON")


def read_document(f):
    """Read and return the tree value stored in a YAML or JSON file.

    Parameters:
        f:  The filename to read from, or '-' for standard input.
            Alternatively a file-like object can be passed.
    """
    if f == STDIN_FILE:
        text = sys.stdin.read()
    elif isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            text = fo.read()
    else:
        text = f.read()
    if isinstance(text, bytes):
        text = text.decode('utf8')
    return parse_document(text)


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors on characters such as the
    arrows of the semantic report.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            stream.reconfigure(errors='backslashreplace')


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """
    _setup_std_stream_encoding()
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
