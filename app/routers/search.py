import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.catalog import Catalog
from app.query import FilterState, filter_records
from app.store import get_catalog
from app.views import ViewMode, project

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["search"])


# Request schema: filter state + which layout to project onto
class SearchRequest(BaseModel):
    q: str = ""                # free-text query (not trimmed)
    category: str = ""         # "" = any category
    time_period: str = ""      # "" = any time period
    view: ViewMode = "cards"   # cards | table


@router.post("/search")
def search(req: SearchRequest, catalog: Catalog = Depends(get_catalog)) -> Dict[str, Any]:
    """
    Filter the catalog and return the result projected for display.

    Request body:
      {"q": "ocean", "category": "Marine", "time_period": "", "view": "table"}

    Response JSON:
      {
        "ok": True,
        "total": <catalog size>,
        "shown": <matching records>,
        "summary": "Showing 3 of 40 resources",
        "view": "table",
        "empty_message": None,
        "items": [ {...}, ... ]
      }
    """
    state = FilterState(query=req.q, category=req.category, time_period=req.time_period)
    filtered = filter_records(catalog, state)
    log.debug("search q=%r category=%r time_period=%r -> %d/%d",
              req.q, req.category, req.time_period, len(filtered), catalog.total)
    return {"ok": True, **project(filtered, req.view, catalog.total)}
