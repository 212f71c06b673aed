"""
Catalog store tests: ordering, lookups and derived vocabularies.
"""

import pytest

from coop_explorer.buyers import BuyerDirectory
from coop_explorer.catalog import CatalogStore, selector_choices
from coop_explorer.schema import SECTORS, CatalogError, InvalidFieldKind


def test_all_records_in_insertion_order(catalog):
    assert [r.id for r in catalog.all_records()] == ["co1", "co2", "co5", "co6", "co7", "co8", "co9", "co10"]
    assert catalog.ids() == [r.id for r in catalog.all_records()]
    assert len(catalog) == 8


def test_all_records_is_stable(catalog):
    assert catalog.all_records() == catalog.all_records()


def test_get_and_contains(catalog):
    assert catalog.get("co9").buyer == "BlueWave Capital"
    assert catalog.get("missing") is None
    assert catalog.get(None) is None
    assert "co1" in catalog
    assert "co3" not in catalog


def test_duplicate_ids_rejected(make_coop):
    with pytest.raises(CatalogError):
        CatalogStore([make_coop(id="a"), make_coop(id="a")])


def test_distinct_scalar_values(catalog):
    assert catalog.distinct_values("sector") == {"Seaweed", "Aquaculture", "Eco-tourism", "Fisheries"}
    assert catalog.distinct_values("value_chain") == {"Producer", "Processor", "Exporter"}


def test_distinct_list_values_are_flattened(catalog):
    assert catalog.distinct_values("certifications") == {"Organic", "HACCP", "ISO 22000", "MSC", "Fair Trade"}
    assert catalog.distinct_values("export_history") == {"Local", "Regional", "International"}


def test_distinct_values_accepts_selector_kind(catalog):
    assert catalog.distinct_values("esg_tag") == catalog.distinct_values("esg")


def test_distinct_values_unknown_field_fails_loudly(catalog):
    with pytest.raises(InvalidFieldKind):
        catalog.distinct_values("members")
    with pytest.raises(InvalidFieldKind):
        catalog.distinct_values("buyer_country")


def test_empty_lists_contribute_nothing(make_coop):
    store = CatalogStore([make_coop(id="a", partners=[]), make_coop(id="b", partners=["P"])])
    assert store.distinct_values("partners") == {"P"}


def test_sorted_values(catalog):
    assert catalog.sorted_values("buyer")[0] == "BelSea Export"
    assert catalog.sorted_values("district") == sorted(catalog.distinct_values("district"))


def test_selector_choices_vocabulary_first(catalog, make_coop):
    assert selector_choices(catalog, "sector") == SECTORS
    store = CatalogStore([make_coop(sector="Cacao")])
    assert selector_choices(store, "sector") == SECTORS + ["Cacao"]


def test_selector_choices_buyers_come_from_catalog(catalog):
    assert selector_choices(catalog, "buyer") == catalog.sorted_values("buyer")


def test_selector_choices_buyer_country(catalog):
    choices = selector_choices(catalog, "buyer_country", BuyerDirectory({"A": "Peru", "B": "Chile"}))
    assert choices == ["Chile", "Peru"]


def test_selector_choices_keeps_current_value(catalog):
    assert selector_choices(catalog, "district", current="Atlantis")[-1] == "Atlantis"
