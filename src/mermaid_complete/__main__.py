"""CLI entry point for mermaid-complete."""

import json
import logging
import sys

import click

from mermaid_complete.completion.provider import CompletionProvider, Position
from mermaid_complete.config import CompletionConfig
from mermaid_complete.ir.symbols import SymbolTable


def _read_input(input: str | None) -> str:
    if not input:
        return sys.stdin.read()
    try:
        with open(input) as f:
            return f.read()
    except OSError as e:
        click.echo(f"error: cannot read '{input}': {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log scanner and ranker debug output to stderr")
def main(verbose: bool) -> None:
    """Mermaid flowchart symbol extraction and completion."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--links", "-l", "show_links", is_flag=True, help="Also print source -> target for each relationship")
def symbols(input: str | None, show_links: bool) -> None:
    """Print the symbols declared or referenced in a document."""
    table = SymbolTable.from_text(_read_input(input))
    for symbol in table.symbols():
        click.echo(f"{symbol.id}\t{symbol.label}")
    if show_links:
        for source, target, operator in table.links.edges(data="operator"):
            click.echo(f"{source} {operator} {target}")


@main.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--line", "-L", "line", type=int, required=True, help="1-based cursor line")
@click.option("--column", "-C", "column", type=int, required=True, help="1-based cursor column")
@click.option("--json", "as_json", is_flag=True, help="Print editor-shaped completion items as JSON")
@click.option("--no-new-symbol", "no_new_symbol", is_flag=True, help="Do not offer the typed word as a new node")
def complete(input: str | None, line: int, column: int, as_json: bool, no_new_symbol: bool) -> None:
    """Print ranked completions for a cursor position."""
    text = _read_input(input)
    provider = CompletionProvider(CompletionConfig(suggest_new_symbols=not no_new_symbol))
    try:
        result = provider.provide_completion_items(text, Position(line=line, column=column))
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return
    for item in result.suggestions:
        click.echo(f"{item.kind.value}\t{item.label}\t{item.detail}")


if __name__ == "__main__":
    main()
