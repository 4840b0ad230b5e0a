"""Tests for plain-text setup and card listing output."""

from sentinels_setup.formatting import format_card_listing, format_setup, format_setup_report
from sentinels_setup.models import Candidate


def _candidate(small_catalog, offset=42):
    return Candidate(
        heroes=(small_catalog.get("A"), small_catalog.get("B")),
        villain=small_catalog.get("X"),
        environment=small_catalog.get("E"),
        offset=offset,
    )


def test_format_setup(small_catalog):
    line = format_setup(_candidate(small_catalog))
    assert line == "A[10], B[-10]; X[20]; E[0]; 2 heroes[42]; difficulty=62"


def test_format_setup_report(small_catalog):
    report = format_setup_report(_candidate(small_catalog), 17)
    assert report == (
        "Found in 17 iterations:\n"
        "\n"
        "Heroes:\n"
        "   A [10]\n"
        "   B [-10]\n"
        "Villain:\n"
        "   X [20]\n"
        "Environment:\n"
        "   E [0]\n"
        "2 heroes [42]\n"
        "Difficulty: 62\n"
    )


def test_format_card_listing(small_catalog):
    listing = format_card_listing(small_catalog.eligible(["baseset"]))
    assert listing == (
        "Heroes:\n"
        "   A\n"
        "   B\n"
        "   C\n"
        "Villains:\n"
        "   X\n"
        "Environments:\n"
        "   E\n"
    )


def test_format_card_listing_empty(small_catalog):
    assert format_card_listing(small_catalog.eligible([])) == "Heroes:\nVillains:\nEnvironments:\n"
