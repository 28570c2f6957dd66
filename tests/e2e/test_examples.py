"""Tests that verify example symbol tables match .symbols.txt golden files."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from mermaid_complete.__main__ import main
from mermaid_complete.ir.symbols import SymbolTable

EXAMPLES_DIR = Path(__file__).parent.parent.parent / "examples"


def find_example_pairs() -> list[tuple[str, Path, Path]]:
    """Find all .mm.md files that have a matching .symbols.txt file."""
    pairs = []
    for mm_file in sorted(EXAMPLES_DIR.glob("*.mm.md")):
        name = mm_file.name.removesuffix(".mm.md")
        expect_file = EXAMPLES_DIR / f"{name}.symbols.txt"
        if expect_file.exists():
            pairs.append((name, mm_file, expect_file))
    return pairs


EXAMPLE_PAIRS = find_example_pairs()


def _format(table: SymbolTable) -> str:
    return "".join(f"{s.id}\t{s.label}\n" for s in table.symbols())


@pytest.mark.parametrize("name,mm_file,expect_file", EXAMPLE_PAIRS, ids=[p[0] for p in EXAMPLE_PAIRS])
def test_example_matches_expect(name: str, mm_file: Path, expect_file: Path) -> None:
    """Extract symbols from a .mm.md file and compare against its golden file."""
    actual = _format(SymbolTable.from_text(mm_file.read_text()))
    assert actual == expect_file.read_text(), f"Symbols for {name} differ from .symbols.txt"


@pytest.mark.parametrize("name,mm_file,expect_file", EXAMPLE_PAIRS, ids=[p[0] for p in EXAMPLE_PAIRS])
def test_cli_matches_expect(name: str, mm_file: Path, expect_file: Path) -> None:
    result = CliRunner().invoke(main, ["symbols", str(mm_file)])
    assert result.exit_code == 0
    assert result.output == expect_file.read_text()


def test_examples_present():
    assert {p[0] for p in EXAMPLE_PAIRS} >= {"decision", "incomplete"}


def test_decision_links():
    table = SymbolTable.from_text((EXAMPLES_DIR / "decision.mm.md").read_text())
    assert table.successors("Check") == ["Process", "Error"]
    assert table.links.edges["Error", "Check"]["operator"] == "-.->"
    assert table.unreferenced() == ["Orphan"]
