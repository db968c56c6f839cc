# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def json_schema_changes():
    schema_path = pjoin(schema_dir, 'change_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def change_validator(json_schema_changes):
    return Validator(json_schema_changes)


@fixture
def nested_pair():
    a = {
        "noChange": "same",
        "levelOne": {
            "levelTwo": "value",
        },
        "arrayOne": [{
            "objValue": "value",
        }],
    }
    b = {
        "noChange": "same",
        "levelOne": {
            "levelTwo": "another value",
        },
        "arrayOne": [{
            "objValue": "new value",
        }, {
            "objValue": "more value",
        }],
    }
    return a, b
