"""
Display formatting tests.
"""

import pytest

from coop_explorer.filters import FilterSpec
from coop_explorer.graph import hub_id
from coop_explorer.labels import (
    EMPTY,
    active_filters_caption,
    coop_label,
    display_value,
    fmt_capacity,
    fmt_number,
    join_list,
    node_label,
    selector_label,
    titleize_slug,
)


@pytest.mark.parametrize(
    "value, expected",
    [(36302, "36,302"), (12, "12"), (12.0, "12"), (12.5, "12.5"), (1234.56, "1,234.6"), (0, "0")],
)
def test_fmt_number(value, expected):
    assert fmt_number(value) == expected


def test_fmt_capacity(make_coop):
    assert fmt_capacity(make_coop(capacity=6000, capacity_unit="kg")) == "6,000 kg"
    assert fmt_capacity(make_coop(capacity=5, capacity_unit="")) == "5"


def test_display_value_and_join_list():
    assert display_value(None) == EMPTY
    assert display_value("  ") == EMPTY
    assert display_value(" Cayo ") == "Cayo"
    assert join_list(("HACCP", "MSC")) == "HACCP, MSC"
    assert join_list(()) == EMPTY


def test_coop_label(make_coop):
    assert coop_label(make_coop(name="Sea Bloom", district="Stann Creek")) == "Sea Bloom (Stann Creek)"
    assert coop_label(make_coop(name="Sea Bloom", district="")) == "Sea Bloom"


def test_selector_labels():
    assert selector_label("esg_tag") == "ESG Tag"
    assert selector_label("buyer_country") == "Buyer Country"
    assert selector_label("some_new-kind") == "Some New Kind"
    assert titleize_slug(None) == ""


@pytest.mark.parametrize("kind", ["hub-sector", "hub-fdi", "hub-district", "buyer", "hub-country"])
def test_node_label_strips_hub_prefix(kind):
    assert node_label(hub_id(kind, "Blue Economy")) == "Blue Economy"


def test_node_label_passes_coop_ids_through():
    assert node_label("co10") == "co10"


def test_caption_without_filters():
    assert active_filters_caption(FilterSpec()) == "No filters applied"
    assert active_filters_caption(FilterSpec(min_members=5)) == "No filters applied"


def test_caption_lists_query_first():
    spec = FilterSpec(query="reef", sector="Eco-tourism", buyer_country="Jamaica")
    assert active_filters_caption(spec) == 'Search: "reef" · Sector: Eco-tourism · Buyer Country: Jamaica'
