"""Struct schema inference over decoded JSON values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from .naming import format_field_name
from .values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

ScalarKind = Literal["string", "float", "int64", "bool"]


@dataclass(frozen=True)
class Scalar:
    kind: ScalarKind


@dataclass(frozen=True)
class Unknown:
    """Type that could not be inferred.

    ``array`` distinguishes an undecidable array (empty or mixed elements)
    from a plain ``null``; the two render differently.
    """

    array: bool = False


@dataclass(frozen=True)
class ArrayOf:
    element: TypeDescriptor


@dataclass(frozen=True)
class FieldDescriptor:
    source_key: str
    identifier: str
    inferred_type: TypeDescriptor


@dataclass(frozen=True)
class NestedStruct:
    """A struct declaration; ``name`` is the raw JSON key it came from."""

    name: str
    fields: tuple[FieldDescriptor, ...] = ()


TypeDescriptor = Union[Scalar, NestedStruct, ArrayOf, Unknown]

UNKNOWN = Unknown()
UNKNOWN_ARRAY = Unknown(array=True)


def infer_struct(name: str, obj: JsonObject, infer_integers: bool = True) -> NestedStruct:
    """Infer a struct from ``obj``, one field per key in sorted key order."""
    fields = tuple(
        FieldDescriptor(
            source_key=key,
            identifier=format_field_name(key),
            inferred_type=infer_type(key, obj.members[key], infer_integers),
        )
        for key in sorted(obj.members)
    )
    return NestedStruct(name=name, fields=fields)


def infer_type(key: str, value: JsonValue, infer_integers: bool = True) -> TypeDescriptor:
    """Return the most specific type for ``value`` stored under ``key``.

    Nested objects become structs named after ``key``. Never fails; anything
    undecidable is ``Unknown``.
    """
    if isinstance(value, JsonNull):
        return UNKNOWN
    if isinstance(value, JsonBool):
        return Scalar("bool")
    if isinstance(value, JsonString):
        return Scalar("string")
    if isinstance(value, JsonNumber):
        return Scalar("int64" if infer_integers and value.integral else "float")
    if isinstance(value, JsonObject):
        return infer_struct(key, value, infer_integers)
    if isinstance(value, JsonArray):
        return _infer_array(key, value, infer_integers)
    return UNKNOWN


def _infer_array(key: str, value: JsonArray, infer_integers: bool) -> TypeDescriptor:
    items = value.items
    if len({type(item) for item in items}) != 1:
        # Empty or heterogeneous; no attempt to build a union.
        return UNKNOWN_ARRAY
    first = items[0]
    if isinstance(first, JsonNumber):
        integral = infer_integers and all(item.integral for item in items)
        return ArrayOf(Scalar("int64" if integral else "float"))
    # Only the first element is sampled; later elements may have other keys.
    return ArrayOf(infer_type(key, first, infer_integers))


def innermost_struct(type_: TypeDescriptor) -> NestedStruct | None:
    """Return the struct a field's type declares, looking through arrays."""
    while isinstance(type_, ArrayOf):
        type_ = type_.element
    return type_ if isinstance(type_, NestedStruct) else None


def count_declarations(struct: NestedStruct) -> int:
    """Number of struct declarations ``struct`` renders, itself included."""
    total = 1
    for field in struct.fields:
        nested = innermost_struct(field.inferred_type)
        if nested is not None:
            total += count_declarations(nested)
    return total


def count_fields(struct: NestedStruct) -> int:
    total = len(struct.fields)
    for field in struct.fields:
        nested = innermost_struct(field.inferred_type)
        if nested is not None:
            total += count_fields(nested)
    return total


__all__ = [
    "ArrayOf",
    "FieldDescriptor",
    "NestedStruct",
    "Scalar",
    "ScalarKind",
    "TypeDescriptor",
    "UNKNOWN",
    "UNKNOWN_ARRAY",
    "Unknown",
    "count_declarations",
    "count_fields",
    "infer_struct",
    "infer_type",
    "innermost_struct",
]
