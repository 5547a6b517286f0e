"""Tests for the CSV site dataset adapter."""

from pathlib import Path

import pytest

from artasia_atlas.adapters.dataset import CSVSiteDataset, read_rows
from artasia_atlas.config import DatasetConfig
from artasia_atlas.domain.errors import DatasetError
from artasia_atlas.graph.normalize import normalize_rows

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def test_read_rows_any_column_order_and_unknown_columns():
    lines = [
        "GPS,Notes,Site,Partner Org\n",
        '"43.24, -79.81",n/a,Bayfront,Harbour\n',
    ]

    rows = read_rows(lines)

    assert rows == [
        {"GPS": "43.24, -79.81", "Notes": "n/a", "Site": "Bayfront", "Partner Org": "Harbour"}
    ]


def test_read_rows_short_and_long_rows():
    rows = read_rows(["Site,Partner Org,Participation\n", "A\n", "B,P,3,extra,cells\n"])

    assert rows[0] == {"Site": "A", "Partner Org": None, "Participation": None}
    assert rows[1] == {"Site": "B", "Partner Org": "P", "Participation": "3"}


def test_read_rows_skips_blank_lines():
    rows = read_rows(["Site\n", "A\n", "\n", "B\n"])
    assert [r["Site"] for r in rows] == ["A", "B"]


def test_load_file_with_bom(tmp_path):
    path = tmp_path / "sites.csv"
    path.write_text("\ufeffSite,Participation\nA,4\n", encoding="utf-8")

    rows = CSVSiteDataset(DatasetConfig(data_dir=tmp_path)).load()

    assert rows == [{"Site": "A", "Participation": "4"}]


def test_explicit_path_wins_over_config(tmp_path):
    path = tmp_path / "other.csv"
    path.write_text("Site\nX\n", encoding="utf-8")

    dataset = CSVSiteDataset(DatasetConfig(data_dir=tmp_path / "nowhere"), path=path)

    assert dataset.source == path
    assert dataset.load() == [{"Site": "X"}]


def test_missing_file_raises_dataset_error(tmp_path):
    dataset = CSVSiteDataset(DatasetConfig(data_dir=tmp_path))

    with pytest.raises(DatasetError) as excinfo:
        dataset.load()

    assert excinfo.value.file_path == str(tmp_path / "sites.csv")
    assert isinstance(excinfo.value.cause, OSError)


def test_bundled_sample_dataset():
    rows = CSVSiteDataset(DatasetConfig(data_dir=DATA_DIR)).load()
    records = normalize_rows(rows)

    assert len(records) == 7
    assert records[0].site == "Bayfront Park Pavilion"
    assert records[0].early_on
    assert records[4].partner == "City Library Network"
    assert not records[4].has_location
    assert records[5].partner == "Unknown"
    assert records[5].participation == 0
