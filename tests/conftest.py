"""
Pytest configuration and shared fixtures for jsonemit tests.

Provides immutable encoding cases and JSON documents used for round-trip
checks against independent parsers.
"""

from dataclasses import dataclass

import pytest

import jsonemit
from jsonemit import Array
from jsonemit import Bool
from jsonemit import Null
from jsonemit import Number
from jsonemit import Object
from jsonemit import String


@dataclass(frozen=True)
class EncodeTestCase:
    """
    Immutable container for a value tree and its expected encoding.
    """

    description: str
    value: jsonemit.Value
    expected_output: str


@pytest.fixture
def basic_encode_cases() -> list[EncodeTestCase]:
    """
    Provides value trees covering every variant with their exact encoding.
    """
    return [
        EncodeTestCase("null", Null(), "null"),
        EncodeTestCase("true", Bool(True), "true"),
        EncodeTestCase("false", Bool(False), "false"),
        EncodeTestCase("integer", Number(123), "123"),
        EncodeTestCase("shifted integer", Number(123, 2), "12300"),
        EncodeTestCase("fraction", Number(15, -1), "1.5"),
        EncodeTestCase("zero", Number(0), "0"),
        EncodeTestCase("negative", Number(-42), "-42"),
        EncodeTestCase("empty string", String(""), '""'),
        EncodeTestCase("escaped quote", String('a"b'), '"a\\"b"'),
        EncodeTestCase(
            "newline", String("line1\nline2"), '"line1\\nline2"'
        ),
        EncodeTestCase("empty array", Array([]), "[]"),
        EncodeTestCase("empty object", Object([]), "{}"),
        EncodeTestCase(
            "simple array", Array([Number(1, 0), Number(2, 0)]), "[1,2]"
        ),
        EncodeTestCase(
            "ordered object",
            Object([("a", Bool(True)), ("b", Null())]),
            '{"a":true,"b":null}',
        ),
        EncodeTestCase(
            "nested containers",
            Object(
                [
                    ("list", Array([Array([]), Object([]), String("x")])),
                    ("obj", Object([("n", Number(-25, -1))])),
                ]
            ),
            '{"list":[[],{},"x"],"obj":{"n":-2.5}}',
        ),
    ]


@pytest.fixture
def json_documents() -> list[str]:
    """
    Provides valid JSON documents for parse, encode, reparse comparisons.

    The first is json.org's JSON_checker pass1.json.
    """
    return [
        """[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
        '[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        '{"JSON Test Pattern pass3": {"The outermost value": "must be an '
        'object or array.", "In this test": "It is an object."}}',
        '{"html": "<script>alert(1)</script><!-- x -->", "n": [0.5, 1e-7]}',
    ]
