"""Tests that verify example dumps match .expect.txt golden files."""

from pathlib import Path

import pytest

from simpledot import parse_graph
from simpledot.ir.dump import format_graph

EXAMPLES_DIR = Path(__file__).parent.parent.parent / "examples"


def find_example_pairs() -> list[tuple[str, Path, Path]]:
    """Find all .gv files that have a matching .expect.txt file."""
    pairs = []
    for gv_file in sorted(EXAMPLES_DIR.glob("*.gv")):
        expect_file = EXAMPLES_DIR / f"{gv_file.stem}.expect.txt"
        if expect_file.exists():
            pairs.append((gv_file.stem, gv_file, expect_file))
    return pairs


EXAMPLE_PAIRS = find_example_pairs()


def test_examples_found():
    assert len(EXAMPLE_PAIRS) >= 3


@pytest.mark.parametrize("name,gv_file,expect_file", EXAMPLE_PAIRS, ids=[p[0] for p in EXAMPLE_PAIRS])
def test_example_matches_expect(name: str, gv_file: Path, expect_file: Path) -> None:
    """Parse a .gv file and compare its dump against the .expect.txt golden file."""
    src = gv_file.read_text()
    expected = expect_file.read_text()
    actual = format_graph(parse_graph(src))
    assert actual == expected, f"Dump for {name} differs from .expect.txt"
