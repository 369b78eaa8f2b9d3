"""Pytest configuration for the textvalue test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path so the suite runs from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

SAMPLES: list[str] = [
    "",
    "a",
    "hello world",
    "  padded\t\n",
    "na\N{LATIN SMALL LETTER I WITH DIAERESIS}ve"
    " caf\N{LATIN SMALL LETTER E WITH ACUTE}",
    "\N{GRINNING FACE} emoji \N{PILE OF POO}",
    "\N{IDEOGRAPHIC SPACE}wide\N{NO-BREAK SPACE}",
    "\N{GREEK CAPITAL LETTER SIGMA}\N{GREEK CAPITAL LETTER ALPHA}",
]


@pytest.fixture(params=SAMPLES, ids=lambda s: repr(s))
def sample(request) -> str:
    """Each sample string in turn."""
    return request.param
