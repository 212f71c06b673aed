"""
Buyer -> country directory tests.
"""

import json

import pytest

from coop_explorer.buyers import BUYER_COUNTRY, BuyerDirectory, UnresolvedBuyerCountry


@pytest.fixture
def directory():
    return BuyerDirectory()


def test_builtin_mapping(directory):
    assert directory.country_for("MarSea Intl") == "Mexico"
    assert directory.country_for("Blue Foods Ltd.") == "Trinidad & Tobago"
    assert "Green Journeys" not in BUYER_COUNTRY
    assert "Green Journeys" not in directory


def test_unknown_buyer_raises(directory):
    with pytest.raises(UnresolvedBuyerCountry):
        directory.country_for("Green Journeys")


def test_matches_fails_closed(directory):
    assert directory.matches("BelSea Export", "Belize")
    assert not directory.matches("BelSea Export", "Mexico")
    assert not directory.matches("Green Journeys", "Belize")
    assert not directory.matches("", "")


def test_countries(directory):
    assert {"Belize", "United States", "Barbados", "Costa Rica"} <= directory.countries()


def test_blank_countries_are_dropped():
    d = BuyerDirectory({"A": "Peru", "B": " "})
    assert "B" not in d
    assert d.countries() == {"Peru"}


def test_empty_mapping_is_not_the_default():
    assert BuyerDirectory({}).countries() == set()


def test_from_path(tmp_path):
    path = tmp_path / "buyers.json"
    path.write_text(json.dumps({"Acme": "Canada"}), encoding="utf-8")
    d = BuyerDirectory.from_path(path)
    assert d.country_for("Acme") == "Canada"
    assert "MarSea Intl" not in d


def test_from_path_rejects_lists(tmp_path):
    path = tmp_path / "buyers.json"
    path.write_text(json.dumps([["Acme", "Canada"]]), encoding="utf-8")
    with pytest.raises(ValueError):
        BuyerDirectory.from_path(path)
