"""
Page bootstrap error reporting.

Streamlit's error/stop calls are replaced so the loader failures can be
checked without a running app.
"""

import json
import logging

import pytest

from coop_explorer import ui
from coop_explorer.config import BUYER_COUNTRIES_ENV, DATA_PATH_ENV, LOG_LEVEL_ENV


class _Stopped(Exception):
    pass


@pytest.fixture
def page(monkeypatch):
    errors = []

    def _stop():
        raise _Stopped()

    monkeypatch.setattr(ui.st, "error", errors.append)
    monkeypatch.setattr(ui.st, "stop", _stop)
    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    monkeypatch.delenv(BUYER_COUNTRIES_ENV, raising=False)
    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")

    pkg_logger = logging.getLogger("coop_explorer")
    handlers, level = list(pkg_logger.handlers), pkg_logger.level
    yield errors
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)


def test_bad_catalog_reports_the_catalog(page, tmp_path, monkeypatch):
    path = tmp_path / "coops.json"
    path.write_text(json.dumps({"id": "co1"}), encoding="utf-8")
    monkeypatch.setenv(DATA_PATH_ENV, str(path))

    with pytest.raises(_Stopped):
        ui.bootstrap()
    assert len(page) == 1
    assert "cooperative catalog" in page[0]
    assert "coops.json" in page[0]


def test_bad_buyer_file_reports_the_buyer_file(page, tmp_path, monkeypatch):
    path = tmp_path / "buyers.json"
    path.write_text(json.dumps(["not", "a", "mapping"]), encoding="utf-8")
    monkeypatch.setenv(BUYER_COUNTRIES_ENV, str(path))

    with pytest.raises(_Stopped):
        ui.bootstrap()
    assert len(page) == 1
    assert "buyer countries file" in page[0]
    assert "cooperative catalog" not in page[0]


def test_good_sources_load(page):
    settings, catalog, buyers = ui.bootstrap()
    assert page == []
    assert len(catalog) == 8
    assert buyers.country_for("MarSea Intl") == "Mexico"
