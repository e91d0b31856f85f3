"""
pluralia command line interface.

    pluralia plural child formula --classical ancient
    pluralia singular children
    pluralia compare mouse mice
    pluralia nouns --manifest pluralia.toml
"""

from __future__ import annotations

import json
import platform
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pluralia._version import get_version
from pluralia.core.classical import ClassicalFlag
from pluralia.core.engine import Engine
from pluralia.core.errors import ManifestError
from pluralia.core.manifest import find_manifest, load_manifest

app = typer.Typer(
    help="Convert English nouns between singular and plural forms.",
    no_args_is_help=True,
)

console = Console()

_COMPARE_LABELS = {
    "eq": "same word",
    "s:p": "singular -> plural",
    "p:s": "plural -> singular",
    "p:p": "two plurals of one noun",
    "": "unrelated",
}


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"pluralia {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Convert English nouns between singular and plural forms."""


def _build_engine(manifest: Path | None, classical: list[ClassicalFlag] | None = None) -> Engine:
    """Engine from an explicit or discovered manifest, plus CLI flags."""
    manifest_path = manifest or find_manifest()
    try:
        engine = Engine.from_manifest(load_manifest(manifest_path)) if manifest_path else Engine()
    except ManifestError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    for flag in sorted(classical or [], key=lambda f: f is not ClassicalFlag.ALL):
        engine.set_classical(flag, True)
    return engine


ManifestOption = Annotated[
    Path | None,
    typer.Option(
        "--manifest",
        "-m",
        help="Path to pluralia.toml (default: search current directory and parents)",
    ),
]

CountOption = Annotated[
    int | None,
    typer.Option("--count", "-n", help="Inflect for this count (1 keeps the singular)"),
]


@app.command()
def plural(
    words: Annotated[list[str], typer.Argument(help="Nouns to pluralize")],
    count: CountOption = None,
    classical: Annotated[
        list[ClassicalFlag] | None,
        typer.Option("--classical", "-c", help="Enable a classical flag (repeatable)"),
    ] = None,
    manifest: ManifestOption = None,
) -> None:
    """Print the plural of each WORD."""
    engine = _build_engine(manifest, classical)
    for word in words:
        typer.echo(engine.plural_noun(word, count))


@app.command()
def singular(
    words: Annotated[list[str], typer.Argument(help="Nouns to singularize")],
    count: CountOption = None,
    manifest: ManifestOption = None,
) -> None:
    """Print the singular of each WORD."""
    engine = _build_engine(manifest)
    for word in words:
        typer.echo(engine.singular_noun(word, count))


@app.command()
def compare(
    word1: Annotated[str, typer.Argument(help="First noun")],
    word2: Annotated[str, typer.Argument(help="Second noun")],
    manifest: ManifestOption = None,
) -> None:
    """Show how two nouns relate (eq, s:p, p:s, p:p)."""
    engine = _build_engine(manifest)
    result = engine.compare_nouns(word1, word2)
    console.print(f"{result or '-'}\t[dim]{_COMPARE_LABELS[result]}[/dim]")


@app.command()
def nouns(
    manifest: ManifestOption = None,
    user_only: Annotated[
        bool, typer.Option("--user", "-u", help="Only list nouns defined in the manifest")
    ] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List irregular nouns known to the engine."""
    engine = _build_engine(manifest)
    user = engine.user_nouns()
    entries = user if user_only else engine.irregular_nouns()

    if output_json:
        typer.echo(json.dumps(dict(sorted(entries.items())), indent=2))
        return

    table = Table(title="Irregular nouns")
    table.add_column("Singular", style="cyan")
    table.add_column("Plural", style="green")
    table.add_column("Source", style="dim")
    for singular_form, plural_form in sorted(entries.items()):
        table.add_row(singular_form, plural_form, "manifest" if singular_form in user else "built-in")
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
