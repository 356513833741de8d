"""Command-line entry point: JSON on stdin, struct declarations on stdout."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from . import get_version
from .api import infer_document, load_config, render
from .config import GeneratorConfig
from .dialects import get_dialect, list_dialects
from .errors import GenerationError, nesting_guard
from .schema import count_declarations, count_fields

app = typer.Typer(
    help="Generate C++ struct definitions from a JSON document read on stdin.",
    add_completion=False,
)
err_console = Console(stderr=True)


def _stdin_is_interactive() -> bool:
    stdin = sys.stdin
    return stdin is not None and stdin.isatty()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


def _build_config(
    config_path: Path | None,
    name: str | None,
    pkg: str | None,
    dialect: str | None,
    float_only: bool,
) -> GeneratorConfig:
    try:
        base = load_config(config_path) if config_path else GeneratorConfig()
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    overrides: dict[str, object] = {}
    if name is not None:
        overrides["name"] = name
    if pkg is not None:
        overrides["package"] = pkg
    if dialect is not None:
        overrides["dialect"] = dialect
    if float_only:
        overrides["infer_integers"] = False
    try:
        cfg = GeneratorConfig.model_validate({**base.model_dump(mode="python"), **overrides})
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if get_dialect(cfg.dialect) is None:
        available = ", ".join(list_dialects())
        raise typer.BadParameter(
            f"Unknown dialect '{cfg.dialect}' (available: {available})",
            param_hint="--dialect",
        )
    return cfg


@app.command()
def generate(
    ctx: typer.Context,
    name: Annotated[
        str | None, typer.Option("--name", "-name", help="The name of the struct.")
    ] = None,
    pkg: Annotated[
        str | None,
        typer.Option("--pkg", "-pkg", help="The name of the package for the generated code."),
    ] = None,
    dialect: Annotated[str | None, typer.Option(help="Target dialect (default: cpp).")] = None,
    config: Annotated[
        Path | None,
        typer.Option(exists=True, dir_okay=False, readable=True, help="YAML/JSON config file."),
    ] = None,
    float_only: Annotated[
        bool, typer.Option("--float-only", help="Render every number as floating-point.")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Print a summary on stderr.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Print the version."
        ),
    ] = False,
) -> None:
    """Read a JSON document from stdin and print struct declarations."""
    cfg = _build_config(config, name, pkg, dialect, float_only)

    if _stdin_is_interactive():
        err_console.print(ctx.get_usage(), markup=False, highlight=False)
        err_console.print("Expects input on stdin", markup=False, highlight=False)
        raise typer.Exit(code=1)

    try:
        # Raw bytes: decoding (and its UTF-8 errors) belong to decode_document.
        struct = infer_document(sys.stdin.buffer.read(), config=cfg)
        text = render(struct, cfg)
        with nesting_guard():
            structs, fields = count_declarations(struct), count_fields(struct)
    except GenerationError as exc:
        err_console.print(f"error parsing {exc}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc

    typer.echo(text, nl=False)
    if verbose:
        err_console.print(
            f"[bold green]Generated[/] {structs} structs, {fields} fields ({cfg.dialect})",
            highlight=False,
        )


def main() -> None:
    """Entry point for `python -m cppjson.cli`."""
    app()


if __name__ == "__main__":
    main()
