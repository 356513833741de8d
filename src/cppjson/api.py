"""Public API for downstream modules."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any

from .config import GeneratorConfig, load_generator_config, save_generator_config
from .dialects import Dialect, get_dialect, list_dialects
from .errors import (
    DecodeError,
    GenerationError,
    NestingTooDeepError,
    UnsupportedShapeError,
    nesting_guard,
)
from .render import render_struct
from .schema import NestedStruct, infer_struct
from .values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    decode_document,
    from_python,
)

__all__ = [
    "DecodeError",
    "GenerationError",
    "GeneratorConfig",
    "NestingTooDeepError",
    "UnsupportedShapeError",
    "generate",
    "generate_from_text",
    "infer_and_render",
    "infer_document",
    "load_config",
    "render",
    "representative_object",
    "resolve_dialect",
    "save_config",
]

_KIND_NAMES: dict[type, str] = {
    JsonNull: "null",
    JsonBool: "bool",
    JsonNumber: "number",
    JsonString: "string",
}


def load_config(path: str | Path) -> GeneratorConfig:
    """Read a generator config from disk."""
    return load_generator_config(path)


def save_config(config: GeneratorConfig, path: str | Path) -> None:
    """Persist a generator config to disk."""
    save_generator_config(config, path)


def resolve_dialect(name: str) -> Dialect:
    dialect = get_dialect(name)
    if dialect is None:
        available = ", ".join(list_dialects())
        raise ValueError(f"Unknown dialect '{name}' (available: {available})")
    return dialect


def representative_object(root: JsonValue) -> JsonObject:
    """Pick the object whose shape describes the whole document.

    An object stands for itself; for a non-empty array of objects only the
    first element is used.
    """
    if isinstance(root, JsonObject):
        return root
    if isinstance(root, JsonArray):
        if not root.items:
            raise UnsupportedShapeError("empty array")
        objects = [item for item in root.items if isinstance(item, JsonObject)]
        if len(objects) != len(root.items):
            raise UnsupportedShapeError("array elements must all be objects")
        return objects[0]
    kind = _KIND_NAMES.get(type(root), type(root).__name__)
    raise UnsupportedShapeError(f"unexpected type: {kind}")


def render(struct: NestedStruct, config: GeneratorConfig | None = None) -> str:
    cfg = config or GeneratorConfig()
    dialect = resolve_dialect(cfg.dialect)
    with nesting_guard():
        return render_struct(struct, dialect, cfg.indent)


def infer_and_render(
    struct_name: str,
    obj: JsonObject | Mapping[str, Any],
    config: GeneratorConfig | None = None,
) -> str:
    """Infer a struct named ``struct_name`` from ``obj`` and render it."""
    cfg = config or GeneratorConfig()
    with nesting_guard():
        if not isinstance(obj, JsonObject):
            obj = JsonObject({str(key): from_python(value) for key, value in obj.items()})
        struct = infer_struct(struct_name, obj, cfg.infer_integers)
    return render(struct, cfg)


def infer_document(
    text: str | bytes,
    struct_name: str | None = None,
    config: GeneratorConfig | None = None,
) -> NestedStruct:
    """Decode ``text`` and infer the root struct without rendering it."""
    cfg = config or GeneratorConfig()
    root = representative_object(decode_document(text))
    with nesting_guard():
        return infer_struct(struct_name or cfg.name, root, cfg.infer_integers)


def generate_from_text(
    text: str | bytes,
    struct_name: str | None = None,
    config: GeneratorConfig | None = None,
) -> str:
    """Generate struct declarations for the JSON document in ``text``.

    Raises ``DecodeError`` for malformed JSON and ``UnsupportedShapeError``
    when the top level is not an object or a non-empty array of objects.
    Documents nested deeper than the interpreter stack allows raise
    ``NestingTooDeepError``.
    """
    cfg = config or GeneratorConfig()
    return render(infer_document(text, struct_name, cfg), cfg)


def generate(
    stream: IO[str] | IO[bytes],
    struct_name: str | None = None,
    config: GeneratorConfig | None = None,
) -> str:
    """Read a whole JSON document from ``stream`` and generate declarations."""
    return generate_from_text(stream.read(), struct_name, config)
