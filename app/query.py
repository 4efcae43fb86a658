# app/query.py
from typing import Iterable, List
from pydantic import BaseModel

from app.normalizers import NormalizedRecord


class FilterState(BaseModel):
    query: str = ""         # free text, matched as a case-insensitive substring
    category: str = ""      # exact match; "" = no filter
    time_period: str = ""   # exact match; "" = no filter


def search_text(r: NormalizedRecord) -> str:
    """Lower-cased text the free-text query is matched against."""
    return " ".join(
        [r.title, r.citation, r.description, r.keywords, r.category, r.custodian]
    ).lower()


def matches(r: NormalizedRecord, state: FilterState) -> bool:
    if state.category and r.category != state.category:
        return False
    if state.time_period and r.time_period != state.time_period:
        return False

    # Not stripped: a whitespace-only query is still a non-empty filter
    q = (state.query or "").lower()
    if not q:
        return True
    return q in search_text(r)


def filter_records(
    collection: Iterable[NormalizedRecord], state: FilterState
) -> List[NormalizedRecord]:
    """Stable filter: the matching records in their original order."""
    return [r for r in collection if matches(r, state)]
