import inspect
import sys

import pytest

from cppjson.errors import DecodeError, GenerationError, NestingTooDeepError
from cppjson.values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    check_literals,
    decode_document,
    from_python,
)


def test_decode_document_builds_value_tree() -> None:
    value = decode_document('{"a": 1, "b": [true, null], "c": "x", "d": 1.5}')
    assert value == JsonObject(
        {
            "a": JsonNumber(1, integral=True),
            "b": JsonArray((JsonBool(True), JsonNull())),
            "c": JsonString("x"),
            "d": JsonNumber(1.5),
        }
    )


def test_numbers_keep_integer_distinction() -> None:
    assert decode_document("[1]") == JsonArray((JsonNumber(1, integral=True),))
    assert decode_document("[1.0]") == JsonArray((JsonNumber(1.0, integral=False),))


def test_integers_outside_int64_are_not_integral() -> None:
    value = decode_document('{"n": 18446744073709551616, "m": 9223372036854775807}')
    assert isinstance(value, JsonObject)
    assert value.members["n"] == JsonNumber(18446744073709551616, integral=False)
    assert value.members["m"] == JsonNumber(9223372036854775807, integral=True)


def test_trailing_data_is_ignored() -> None:
    assert decode_document('{"a": "x"} trailing') == JsonObject({"a": JsonString("x")})
    assert decode_document(' {"a": "x"}{"b": 2}') == JsonObject({"a": JsonString("x")})


def test_bytes_input_is_utf8() -> None:
    assert decode_document('{"ключ": "значение"}'.encode()) == JsonObject(
        {"ключ": JsonString("значение")}
    )


@pytest.mark.parametrize(
    "text",
    [
        '{"a": ',
        "",
        "   ",
        "{'a': 1}",
        b"\xff\xfe",
        '{"a": 01}',
        '{"a": -01.5}',
        '{"a": NaN}',
        '{"a": Infinity}',
        '{"a": [1, -Infinity]}',
        '{"a": NaN} trailing',
        '{"a": 01} trailing',
    ],
)
def test_malformed_input_raises_decode_error(text) -> None:
    with pytest.raises(DecodeError):
        decode_document(text)


def test_decode_error_is_a_value_error() -> None:
    assert issubclass(DecodeError, GenerationError)
    assert issubclass(DecodeError, ValueError)


def test_from_python_rejects_foreign_objects() -> None:
    with pytest.raises(TypeError):
        from_python({"a": object()})
    assert from_python(True) == JsonBool(True)
    assert from_python((1, "x")) == JsonArray((JsonNumber(1, integral=True), JsonString("x")))


def test_literal_check_skips_string_contents() -> None:
    check_literals('{"a": "NaN \\" 01", "b": [-0, 1.5e-3, 2E+10, true, false, null]}')
    value = decode_document('{"a": "NaN \\" 01"}')
    assert value == JsonObject({"a": JsonString('NaN " 01')})


def test_nesting_beyond_parser_limits_is_a_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_document("[" * 100_000 + "]" * 100_000)


def test_stack_exhaustion_while_wrapping_values_is_reported() -> None:
    text = '{"a": ' * 400 + "1" + "}" * 400
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(len(inspect.stack(0)) + 100)
    try:
        with pytest.raises(NestingTooDeepError):
            decode_document(text)
    finally:
        sys.setrecursionlimit(limit)
    assert issubclass(NestingTooDeepError, GenerationError)
