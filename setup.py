#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

TREEDIFF_PATH = HERE / "treediff"


def get_version(path):
    ns = {}
    with open(path) as f:
        exec(f.read(), ns)
    return ns["__version__"]


VERSION = get_version(TREEDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='treediff',
      version=VERSION,
      description='Structural diff of JSON and YAML documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      packages=find_packages(include=['treediff', 'treediff.*']),
      package_data={'treediff': ['tests/files/*']},
      python_requires='>=3.8',
      install_requires=[
          'colorama',
          'traitlets>=5',
          'PyYAML>=5.1',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'treediff = treediff.treediffapp:main',
          ],
      },
      classifiers=[
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
      )
