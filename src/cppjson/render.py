"""Render inferred structs as nested struct declarations."""

from __future__ import annotations

from .dialects import CPP, Dialect
from .schema import ArrayOf, NestedStruct, Scalar, TypeDescriptor, innermost_struct


def render_type(type_: TypeDescriptor, dialect: Dialect = CPP) -> str:
    if isinstance(type_, Scalar):
        return dialect.scalar_names[type_.kind]
    if isinstance(type_, NestedStruct):
        return type_.name
    if isinstance(type_, ArrayOf):
        return dialect.container.format(render_type(type_.element, dialect))
    return dialect.any_array if type_.array else dialect.any_type


def render_struct(struct: NestedStruct, dialect: Dialect = CPP, indent: str = "\t") -> str:
    """Return the declaration of ``struct`` with a trailing newline.

    Each nested struct is declared inside its parent, directly above the
    field that uses it.
    """
    return "\n".join(_declaration_lines(struct, dialect, indent, depth=0)) + "\n"


def _declaration_lines(
    struct: NestedStruct, dialect: Dialect, indent: str, depth: int
) -> list[str]:
    pad = indent * depth
    inner = indent * (depth + 1)
    lines = [pad + dialect.struct_open.format(name=struct.name)]
    for field in struct.fields:
        nested = innermost_struct(field.inferred_type)
        if nested is not None:
            if len(lines) > 1:
                lines.append("")
            lines.extend(_declaration_lines(nested, dialect, indent, depth + 1))
        rendered = render_type(field.inferred_type, dialect)
        lines.append(inner + dialect.field.format(type=rendered, name=field.identifier))
    lines.append(pad + dialect.struct_close)
    return lines


__all__ = ["render_struct", "render_type"]
