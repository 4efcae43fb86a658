import json
import pytest

from app.settings import CATALOG_DATA_PATH
from app.store import load_catalog, load_raw_collection


def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "B": {"Data Category": "x"},
        "A": {"Keywords": "k", "Time Period of Content": 1999},
    }), encoding="utf-8")

    cat = load_catalog(path)
    assert [r.id for r in cat] == ["B", "A"]
    assert cat.get("A").time_period == "1999"
    assert cat.categories == ["x"]


def test_non_object_document_is_rejected(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_raw_collection(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_raw_collection(tmp_path / "nope.json")


def test_bundled_sample_data_loads():
    cat = load_catalog(CATALOG_DATA_PATH)
    assert cat.total == 5
    assert cat.get("Coastal Erosion Monitoring").link == "https://coastal.example.org/contact"
    assert cat.get("River Water Quality").keywords == "nitrates, phosphates, sampling"
    assert cat.get("Estuary Sediment Cores").link == "https://geology.example.edu/cores"
