"""
CLI entry point for polyglot_ast.

Uses Typer for modern CLI with auto-completion and help generation.

Usage:
    polyglot-ast print samples/main.c
    polyglot-ast print snippet.txt --language python
    polyglot-ast calls samples/main.py
    polyglot-ast languages
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from polyglot_ast.adapters.treesitter import CallKind, supported_languages
from polyglot_ast.common.exceptions import InvalidArgumentError
from polyglot_ast.common.logging import DiagnosticCollector, configure_logging
from polyglot_ast.services.config_models import PolyglotSettings
from polyglot_ast.tree import CallSiteCollector, PolyglotTree, TreePrinter

app = typer.Typer(
    name="polyglot-ast",
    help="Polyglot AST CLI - Build syntax trees spanning multiple languages",
    no_args_is_help=True,
)


def _build_tree(file: Path, language: str | None, verbose: bool) -> PolyglotTree:
    settings = PolyglotSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    # Diagnostics are printed below, not through logging
    diagnostics = DiagnosticCollector(emit=False)
    try:
        tree = PolyglotTree.from_path(file, language, settings=settings, diagnostics=diagnostics)
    except InvalidArgumentError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    for diagnostic in diagnostics:
        typer.echo(f"Warning: {diagnostic}", err=True)

    if tree is None:
        typer.echo(f"Error: unable to build a tree for {file}", err=True)
        raise typer.Exit(1)

    return tree


@app.command("print")
def print_tree(
    file: Annotated[Path, typer.Argument(help="Source file to build the tree from")],
    language: Annotated[
        str | None,
        typer.Option("--language", "-l", help="Language of the file (default: from extension)"),
    ] = None,
    no_code: Annotated[
        bool, typer.Option("--no-code", help="Do not print the source of leaf nodes")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Print the combined syntax tree of a polyglot program."""
    tree = _build_tree(file, language, verbose)

    printer = TreePrinter(show_code=not no_code)
    tree.apply(printer)
    typer.echo(printer.get_result())


@app.command("calls")
def list_calls(
    file: Annotated[Path, typer.Argument(help="Source file to build the tree from")],
    language: Annotated[
        str | None,
        typer.Option("--language", "-l", help="Language of the file (default: from extension)"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """List the interop calls of a polyglot program."""
    tree = _build_tree(file, language, verbose)

    collector = CallSiteCollector()
    tree.apply(collector)

    if not collector.calls:
        typer.echo("No polyglot calls found.")
        return

    for call in collector.calls:
        row, column = call.position
        location = f"{call.origin or '<inline>'}:{row + 1}:{column + 1}"
        detail = ""
        if call.target_language:
            detail = f" -> {call.target_language}"
        elif call.binding is not None:
            detail = f" {call.binding!r}"
        elif call.kind is CallKind.EVAL:
            detail = " (not linked)"
        indent = "  " * call.depth
        typer.echo(f"{indent}{location} [{call.language}] {call.kind.value}{detail}")


@app.command("languages")
def list_languages() -> None:
    """List the supported languages."""
    for name in sorted(supported_languages()):
        typer.echo(name)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
