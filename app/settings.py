# app/settings.py
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# JSON document: {"<record title>": {"<source field>": "<value>", ...}, ...}
CATALOG_DATA_PATH = Path(os.getenv("CATALOG_DATA_PATH", PROJECT_ROOT / "data" / "catalog.json"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
