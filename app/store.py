import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from fastapi import Request

from app.catalog import Catalog

log = logging.getLogger(__name__)


def load_raw_collection(path: Union[str, Path]) -> Dict[str, Any]:
    """Read the raw collection: a JSON object keyed by record title."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(
            f"Catalog data must be a JSON object keyed by title, got {type(data).__name__}"
        )
    return data


def load_catalog(path: Union[str, Path]) -> Catalog:
    raw = load_raw_collection(path)
    log.info("loaded %d raw records from %s", len(raw), path)
    return Catalog.from_raw(raw)


def get_catalog(request: Request) -> Catalog:
    """FastAPI dependency: the catalog built at startup."""
    return request.app.state.catalog
