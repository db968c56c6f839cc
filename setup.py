#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

YAJSONDIFF_PATH = HERE / "yajsondiff"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(YAJSONDIFF_PATH / '_version.py')


if __name__ == '__main__':
    setup(
      name="yajsondiff",
      version=VERSION,
      description="Structural diff, patch and revert for nested dicts and lists",
      license="BSD",
      packages=[
          "yajsondiff",
          "yajsondiff.diffing",
          "yajsondiff.tests",
      ],
      package_data={
          "yajsondiff": ["*.schema.json"],
      },
      python_requires=">=3.7",
      install_requires=[],
      extras_require={
          "test": [
              "pytest>=6.0",
              "pytest-timeout",
              "jsonschema",
          ],
      },
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
      ],
      )
