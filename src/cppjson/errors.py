"""Exceptions raised while turning a JSON document into struct declarations."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class GenerationError(ValueError):
    """Base class for failures that abort a generation run."""


class DecodeError(GenerationError):
    """The input is not a valid JSON document."""


class UnsupportedShapeError(GenerationError):
    """The top-level value cannot be described as a struct.

    Only an object, or a non-empty array whose elements are all objects, is
    accepted at the top level.
    """


class NestingTooDeepError(GenerationError):
    """The document is nested deeper than inference can follow."""


@contextmanager
def nesting_guard() -> Iterator[None]:
    """Turn stack exhaustion on very deep documents into ``NestingTooDeepError``."""
    try:
        yield
    except RecursionError as exc:
        raise NestingTooDeepError("document is nested too deeply") from exc


__all__ = [
    "DecodeError",
    "GenerationError",
    "NestingTooDeepError",
    "UnsupportedShapeError",
    "nesting_guard",
]
