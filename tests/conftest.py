# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.catalog import Catalog
from app.store import get_catalog


# --- A small raw collection with the header variations seen in real exports ---
@pytest.fixture
def raw_collection():
    return {
        "Ocean Survey": {
            "Citation": "Marine Institute (2019).",
            "Description": "  Multibeam bathymetry of the shelf. ",
            "Time Period of Content": "2019",
            "Data Category": "Marine",
            "Data Custodian": "Marine Institute",
            "Keywords (comma-separated)": "bathymetry, seabed",
            "External Metadata Reference": "https://data.example.org/ocean",
            "Point of Contact": "https://contact.example.org",
        },
        "Coastal Erosion": {
            "Citation": "Coastal Unit (2021).",
            "Description": "",
            "Detailed Description": "LiDAR surveys of the coastline.",
            "Time Period of Content": "2021",
            "Data Category": "Coastal",
            "Data Custodian": "Coastal Unit",
            "Keywords": "erosion, lidar",
            "External Metadata Reference": "NA or TBC",
            "Point of Contact": "https://coastal.example.org",
        },
        "River Quality": {
            "Overview Description": "Monthly river sampling.",
            "Time Period of Content": "2020",
            "Data Category": "Freshwater",
            "Data Custodian": "Environment Agency",
            "External Metadata Reference": "N/A",
            "Point of Contact": "N/A",
        },
        "Seabird Counts": {
            "Description": "Seabird colony counts.",
            "Time Period of Content": "2019",
            "Data Category": "Marine",
            "Data Custodian": None,
            "KEYWORDS free text": "seabirds",
            "External Metadata Reference": None,
        },
    }


@pytest.fixture
def catalog(raw_collection):
    return Catalog.from_raw(raw_collection)


# --- Override the catalog dependency so tests don't depend on the data file ---
@pytest.fixture(autouse=True)
def override_get_catalog(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
