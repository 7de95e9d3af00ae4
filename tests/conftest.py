"""Pytest configuration and fixtures for cross calculator tests."""

import pytest

from locus import locus, organism


@pytest.fixture
def round_mother():
    """Single dominant locus: round leaves."""
    return organism("Mother", [locus(name="Round", dominant=True, char="L")])


@pytest.fixture
def mutant_father():
    """Single recessive locus: mutant leaves."""
    return organism("Father", [locus(name="Mutant", dominant=False, char="L")])


@pytest.fixture
def dihybrid():
    """Two independent loci, L (leaf shape) and C (foliage colour)."""
    mother = organism(
        "Round green",
        [locus(name="Round", dominant=True, char="L"), locus(name="Green", dominant=True, char="C")],
    )
    father = organism(
        "Mutant purple",
        [locus(name="Mutant", dominant=False, char="L"), locus(name="Purple", dominant=False, char="C")],
    )
    return mother, father


@pytest.fixture
def seeds():
    """Mendel's seed shape x seed colour cross."""
    mother = organism(
        "Round yellow",
        [locus(name="Round", dominant=True, char="R"), locus(name="Yellow", dominant=True, char="Y")],
    )
    father = organism(
        "Wrinkled green",
        [locus(name="Wrinkled", dominant=False, char="R"), locus(name="Green", dominant=False, char="Y")],
    )
    return mother, father


def make_cross(num_traits):
    """Build a cross with `num_traits` loci labelled A, B, C, ..."""
    chars = "ABCDEFGHIJ"[:num_traits]
    mother = organism("Mother", [locus(name=f"Dom{c}", dominant=True, char=c) for c in chars])
    father = organism("Father", [locus(name=f"Rec{c}", dominant=False, char=c) for c in chars])
    return mother, father
