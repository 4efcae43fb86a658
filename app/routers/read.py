from typing import Any, Dict, List
from fastapi import APIRouter, Depends, HTTPException, Query

from app.catalog import Catalog
from app.normalizers import NormalizedRecord
from app.query import FilterState, filter_records
from app.store import get_catalog

router = APIRouter(prefix="", tags=["read"])

# -------------------------------------------------------------------
# Helper serializer: turn a record into a plain dict for JSON
# -------------------------------------------------------------------
def _record_to_dict(r: NormalizedRecord, include_raw: bool = False) -> Dict[str, Any]:
    """Return the normalized fields, plus the source fields if asked."""
    return r.model_dump(exclude=None if include_raw else {"raw"})

# -------------------------------------------------------------------
# List endpoints
# -------------------------------------------------------------------
@router.get("/records")
def list_records(
    q: str = Query("", description="Substring of title/citation/description/keywords/category/custodian, case-insensitive"),
    category: str = Query("", description="Exact category match"),
    time_period: str = Query("", description="Exact time period match"),
    include_raw: bool = Query(False, description="Include the source fields of each record"),
    catalog: Catalog = Depends(get_catalog),
) -> List[Dict[str, Any]]:
    """
    List records with optional filters, in catalog order:
      - free-text q
      - category
      - time_period
    """
    state = FilterState(query=q, category=category, time_period=time_period)
    return [_record_to_dict(r, include_raw) for r in filter_records(catalog, state)]

@router.get("/facets")
def list_facets(catalog: Catalog = Depends(get_catalog)) -> Dict[str, List[str]]:
    """Distinct values for populating the category and time period filters."""
    return {"categories": catalog.categories, "time_periods": catalog.time_periods}

# -------------------------------------------------------------------
# Single record lookup
# -------------------------------------------------------------------
@router.get("/records/{record_id:path}")
def get_record(record_id: str, catalog: Catalog = Depends(get_catalog)) -> Dict[str, Any]:
    """Fetch a single record by its id (the source title), including raw fields."""
    r = catalog.get(record_id)
    if r is None:
        raise HTTPException(404, "Record not found")
    return {"item": _record_to_dict(r, include_raw=True)}
