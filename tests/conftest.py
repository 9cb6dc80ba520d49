"""
Shared fixtures for jtree tests.

JSON_checker pass and fail documents plus basic value cases, held in
immutable JsonTestCase records.
"""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass(frozen=True)
class JsonTestCase:
    """
    One JSON document and what parsing it should produce.

    A non-empty skip_reason marks a document jtree accepts on purpose.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides the JSON_checker fail1..fail33 documents (json.org), in order,
    followed by a raw control character inside a string.
    """
    fail_docs = [
        '"A JSON payload should be an object or array, not a string."',
        '["Unclosed array"',
        '{unquoted_key: "keys must be quoted"}',
        '["extra comma",]',
        '["double extra comma",,]',
        '[   , "<-- missing value"]',
        '["Comma after the close"],',
        '["Extra close"]]',
        '{"Extra comma": true,}',
        '{"Extra value after close": true} "misplaced quoted value"',
        '{"Illegal expression": 1 + 2}',
        '{"Illegal invocation": alert()}',
        '{"Numbers cannot have leading zeroes": 013}',
        '{"Numbers cannot be hex": 0x14}',
        '["Illegal backslash escape: \\x15"]',
        "[\\naked]",
        '["Illegal backslash escape: \\017"]',
        '[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
        '{"Missing colon" null}',
        '{"Double colon":: null}',
        '{"Comma instead of colon", null}',
        '["Colon instead of comma": false]',
        '["Bad value", truth]',
        "['single quote']",
        '["\ttab\tcharacter\tin\tstring\t"]',
        '["tab\\   character\\   in\\  string\\  "]',
        '["line\nbreak"]',
        '["line\\\nbreak"]',
        "[0e]",
        "[0e+]",
        "[0e+-1]",
        '{"Comma instead if closing brace": true,',
        '["mismatch"}',
        # raw U+001F
        '["A\u001fZ control characters in string"]',
    ]

    skips = {
        1: "any value is accepted at the top level",
        18: "nesting is unbounded unless max_depth is set",
    }

    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            should_fail=True,
            skip_reason=skips.get(idx + 1, ""),
        )
        for idx, doc in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """Provides JSON_checker pass1..pass3; pass1 is indexed by the tests."""
    return [
        JsonTestCase(
            description="pass1.json",
            input_data="""[
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
            should_fail=False,
        ),
        JsonTestCase(
            description="pass2.json",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            should_fail=False,
        ),
        JsonTestCase(
            description="pass3.json",
            input_data=(
                '{"JSON Test Pattern pass3": '
                '{"The outermost value": "must be an object or array.", '
                '"In this test": "It is an object."}}'
            ),
            should_fail=False,
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """Provides one small document per kind with its to_python() result."""
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42),
        JsonTestCase("negative integer", "-17", False, -17),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
        JsonTestCase("int64 minimum", str(-(2**63)), False, -(2**63)),
        JsonTestCase("integer past int64", str(2**63), False, 2.0**63),
        JsonTestCase("exponent float", "1E2", False, 100.0),
        JsonTestCase(
            "escaped string",
            '"a\\u00e9\\ud83d\\ude00"',
            False,
            "a\xe9\U0001f600",
        ),
        JsonTestCase(
            "nested containers",
            '{"a": [null, {"b": false}]}',
            False,
            {"a": [None, {"b": False}]},
        ),
    ]
