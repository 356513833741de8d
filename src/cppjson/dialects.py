"""Registry of target-language dialects used when rendering structs.

A dialect only describes spelling: scalar type names, the placeholder for
values whose type is unknown, the array container and the shape of a struct
declaration. The C++ dialect is registered on import; other packages can
attach their own with :func:`register_dialect` without touching the renderer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Dialect:
    """Textual spelling of a target language.

    ``container`` and the templates are ``str.format`` patterns: ``container``
    takes the element type positionally, ``struct_open`` takes ``name`` and
    ``field`` takes ``type`` and ``name``.
    """

    name: str
    scalar_names: Mapping[str, str]
    any_type: str
    any_array: str
    container: str
    struct_open: str = "struct {name} {{"
    struct_close: str = "};"
    field: str = "{type} {name};"


CPP = Dialect(
    name="cpp",
    scalar_names=MappingProxyType(
        {
            "string": "std::string",
            "float": "float",
            "int64": "int64_t",
            "bool": "bool",
        }
    ),
    any_type="std::any",
    any_array="std::vector<std::any>",
    container="std::vector<{}>",
)

_REGISTRY: dict[str, Dialect] = {}


def register_dialect(dialect: Dialect) -> None:
    """Register ``dialect`` under ``dialect.name``, replacing any previous entry."""
    _REGISTRY[dialect.name] = dialect


def get_dialect(name: str) -> Dialect | None:
    """Return the registered dialect for ``name``, if any."""
    return _REGISTRY.get(name)


def list_dialects() -> list[str]:
    """Return the list of registered dialect names."""
    return sorted(_REGISTRY)


register_dialect(CPP)

__all__ = ["CPP", "Dialect", "get_dialect", "list_dialects", "register_dialect"]
