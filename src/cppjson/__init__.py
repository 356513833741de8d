"""
cppjson
=======

Infer nested struct declarations from ad-hoc JSON documents, as a starting
point for strongly-typed code.
"""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Return the installed package version or '0.0.0' when unavailable."""
    try:
        return version("cppjson")
    except PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
