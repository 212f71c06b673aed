"""
Catalog loading, table frame and CSV export tests.
"""

import json

import pytest

from coop_explorer.data_io import (
    DEFAULT_DATA_PATH,
    EXPORT_FILENAME,
    TABLE_COLUMNS,
    load_records,
    records_to_frame,
    to_csv_bytes,
    to_csv_text,
)
from coop_explorer.schema import EXPORT_COLUMNS, CatalogError

HEADER = (
    "Cooperative Name,Official Name,District,GPS,Sector,Value Chain,Linked Buyer,"
    "Membership Size,Production Capacity,Capacity Unit,Product Focus,Certifications,"
    "Export History,FDI Priority,ESG/SDG,Partners,Contact"
)


def _write(tmp_path, payload):
    path = tmp_path / "coops.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


# ── Loading ───────────────────────────────────────────────────────────────────


def test_packaged_catalog_loads():
    records = load_records(DEFAULT_DATA_PATH)
    assert len(records) == 8
    assert records[0].id == "co1"
    assert records[0].certifications == ("Organic",)


def test_non_list_file_is_rejected(tmp_path):
    with pytest.raises(CatalogError):
        load_records(_write(tmp_path, {"id": "co1"}))


def test_duplicate_ids_are_rejected(tmp_path):
    rec = {"id": "a", "name": "A", "value_chain": "Producer"}
    with pytest.raises(CatalogError):
        load_records(_write(tmp_path, [rec, rec]))


def test_empty_list_loads(tmp_path):
    assert load_records(_write(tmp_path, [])) == []


# ── Table frame ───────────────────────────────────────────────────────────────


def test_empty_frame_keeps_columns():
    df = records_to_frame([])
    assert list(df.columns) == TABLE_COLUMNS
    assert df.empty


def test_frame_rows_follow_record_order(records):
    df = records_to_frame(records)
    assert df["ID"].tolist() == [r.id for r in records]
    row = df.set_index("ID").loc["co7"]
    assert row["Certs"] == "HACCP, ISO 22000"
    assert row["Export"] == "International"
    assert row["Members"] == 95


# ── CSV export ────────────────────────────────────────────────────────────────


def test_header_is_fixed():
    assert ",".join(EXPORT_COLUMNS) == HEADER
    assert to_csv_text([]) == HEADER


def test_one_line_per_record_without_trailing_newline(make_coop):
    text = to_csv_text([make_coop(id="a"), make_coop(id="b")])
    assert len(text.split("\n")) == 3
    assert not text.endswith("\n")


def test_list_fields_are_pipe_joined(make_coop):
    c = make_coop(certifications=["Organic", "HACCP"], esg=["Climate", "Community"], partners=[])
    fields = to_csv_text([c]).split("\n")[1].split(",")
    assert len(fields) == len(EXPORT_COLUMNS)
    assert fields[11] == "Organic|HACCP"
    assert fields[14] == "Climate|Community"
    assert fields[15] == ""


def test_numbers_are_plain(make_coop):
    whole = to_csv_text([make_coop(capacity=12.0, members=7)]).split("\n")[1].split(",")
    assert whole[7:9] == ["7", "12"]
    half = to_csv_text([make_coop(capacity=12.5)]).split("\n")[1].split(",")
    assert half[8] == "12.5"


def test_catalog_row_matches_export_format(catalog):
    line = to_csv_text([catalog.get("co1")]).split("\n")[1]
    assert line == (
        "Sea Bloom,Sea Bloom Cooperative,Stann Creek,16.90,-88.20,Seaweed,Producer,"
        "Belize Sea Co.,45,12,tons,Raw seaweed,Organic,Local,Blue Economy,"
        "Climate|Community,NGO A,lead@seabloom.bz | +501 555-1001"
    )


def test_embedded_commas_are_not_quoted(make_coop):
    row = to_csv_text([make_coop(product="Fish, smoked")]).split("\n")[1]
    assert '"' not in row
    assert len(row.split(",")) == len(EXPORT_COLUMNS) + 1


def test_bytes_are_utf8(make_coop):
    records = [make_coop(name="Café Maya")]
    data = to_csv_bytes(records)
    assert data == to_csv_text(records).encode("utf-8")
    assert "Café Maya" in data.decode("utf-8")


def test_export_filename():
    assert EXPORT_FILENAME == "beltraide_cooperatives.csv"
