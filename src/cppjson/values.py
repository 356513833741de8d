"""Closed JSON value model and the document decoding boundary."""

from __future__ import annotations

import json as std_json
import re
from dataclasses import dataclass, field
from typing import Any, Union

import ujson as json

from .errors import DecodeError, nesting_guard

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class JsonNull:
    """JSON ``null``."""


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonNumber:
    """A JSON number.

    ``integral`` is set only when the decoder produced an integer literal that
    fits in a signed 64-bit integer; every other number is floating-point.
    """

    value: int | float
    integral: bool = False


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonArray:
    items: tuple[JsonValue, ...] = ()


@dataclass(frozen=True)
class JsonObject:
    members: dict[str, JsonValue] = field(default_factory=dict)


JsonValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]


def from_python(obj: Any) -> JsonValue:
    """Wrap a decoded Python value (dict/list/str/int/float/bool/None)."""
    if obj is None:
        return JsonNull()
    # bool before int: bool is an int subclass.
    if isinstance(obj, bool):
        return JsonBool(obj)
    if isinstance(obj, int):
        return JsonNumber(obj, integral=INT64_MIN <= obj <= INT64_MAX)
    if isinstance(obj, float):
        return JsonNumber(obj)
    if isinstance(obj, str):
        return JsonString(obj)
    if isinstance(obj, list | tuple):
        return JsonArray(tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        return JsonObject({str(key): from_python(value) for key, value in obj.items()})
    msg = f"Cannot represent {type(obj).__name__} as a JSON value"
    raise TypeError(msg)


# A string literal, or a run of characters outside any string.
_TOKEN = re.compile(r'"(?:[^"\\]|\\.)*"|[^\s\[\]{}:,"]+', re.DOTALL)
_BARE_LITERAL = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?|true|false|null")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal {name!r}")


def check_literals(text: str) -> None:
    """Raise ``DecodeError`` for bare literals JSON does not allow.

    ``ujson`` accepts ``NaN``, ``Infinity`` and numbers with leading zeros;
    strict JSON does not.
    """
    for match in _TOKEN.finditer(text):
        token = match.group()
        if token.startswith('"'):
            continue
        if _BARE_LITERAL.fullmatch(token) is None:
            raise DecodeError(f"invalid literal {token!r} at offset {match.start()}")


def decode_document(text: str | bytes) -> JsonValue:
    """Decode one JSON document.

    ``ujson`` handles the common case. When it rejects the input, the stdlib
    decoder is asked for the first complete document only, so trailing data
    is ignored and integers wider than 64 bits still decode.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"input is not valid UTF-8: {exc}") from exc
    try:
        data = json.loads(text)
    except (ValueError, OverflowError) as exc:
        decoder = std_json.JSONDecoder(parse_constant=_reject_constant)
        try:
            data, _ = decoder.raw_decode(text.lstrip())
        except (ValueError, RecursionError):
            raise DecodeError(str(exc) or "invalid JSON document") from exc
    else:
        # ujson consumed the whole text, so every token belongs to the document.
        check_literals(text)
    with nesting_guard():
        return from_python(data)


__all__ = [
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "check_literals",
    "decode_document",
    "from_python",
]
