def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    p = r.json()
    assert p["ok"] is True
    assert p["service"] == "catalog"

def test_list_records(client):
    r = client.get("/records")
    assert r.status_code == 200
    data = r.json()
    assert [d["title"] for d in data] == ["Ocean Survey", "Coastal Erosion", "River Quality", "Seabird Counts"]
    assert "raw" not in data[0]

def test_list_records_filtered(client):
    r = client.get("/records", params={"q": "OCEAN", "category": "Marine"})
    assert r.status_code == 200
    assert [d["id"] for d in r.json()] == ["Ocean Survey"]

def test_list_records_category_is_case_sensitive(client):
    r = client.get("/records", params={"category": "marine"})
    assert r.status_code == 200
    assert r.json() == []

def test_list_records_with_raw(client):
    r = client.get("/records", params={"time_period": "2020", "include_raw": True})
    data = r.json()
    assert len(data) == 1
    assert data[0]["raw"]["Overview Description"] == "Monthly river sampling."

def test_facets(client):
    r = client.get("/facets")
    assert r.status_code == 200
    assert r.json() == {
        "categories": ["Coastal", "Freshwater", "Marine"],
        "time_periods": ["2019", "2020", "2021"],
    }

def test_get_record(client):
    r = client.get("/records/Coastal Erosion")
    assert r.status_code == 200
    item = r.json()["item"]
    assert item["description"] == "LiDAR surveys of the coastline."
    assert item["link"] == "https://coastal.example.org"
    assert item["raw"]["External Metadata Reference"] == "NA or TBC"

def test_get_record_not_found(client):
    r = client.get("/records/Missing")
    assert r.status_code == 404

def test_missing_data_file_serves_empty_catalog(monkeypatch, tmp_path):
    import app.main as main_module
    from app.main import app as api
    from app.store import get_catalog
    from fastapi.testclient import TestClient

    monkeypatch.setattr(main_module, "CATALOG_DATA_PATH", tmp_path / "missing.json")
    api.dependency_overrides.pop(get_catalog, None)
    with TestClient(api) as c:
        health = c.get("/healthz").json()
        assert health["records"] == 0
        assert health["load_error"]
        assert c.get("/records").json() == []
        assert c.get("/facets").json() == {"categories": [], "time_periods": []}
