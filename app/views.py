"""
Projection of filtered records onto the two result layouts
(cards and table) plus the result-count summary.
"""
from typing import Any, Dict, List, Literal, Sequence

from app.normalizers import NormalizedRecord

ViewMode = Literal["cards", "table"]

NO_RESULTS_SUMMARY = "No matching resources. Try a different search term or clear filters."
NO_RESULTS_CARDS = "No matching records. Try adjusting your search or filters."
NO_RESULTS_TABLE = "No matching records."

TABLE_COLUMNS = ["Title", "Category", "Time Period", "Keywords", "Custodian", "Link"]


def summary_message(shown: int, total: int) -> str:
    if shown == 0:
        return NO_RESULTS_SUMMARY
    return f"Showing {shown} of {total} resources"


def card(r: NormalizedRecord) -> Dict[str, Any]:
    """Card layout: optional parts are left out when the field is empty."""
    out: Dict[str, Any] = {
        "title": r.title,
        "badges": [b for b in (r.category, r.time_period) if b],
    }
    if r.citation:
        out["citation"] = r.citation
    if r.description:
        out["description"] = r.description
    meta = []
    if r.keywords:
        meta.append("Keywords: " + r.keywords)
    if r.custodian:
        meta.append("Custodian: " + r.custodian)
    out["meta"] = meta
    if r.link:
        out["link"] = {"href": r.link, "label": "Open resource"}
    return out


def table_row(r: NormalizedRecord) -> Dict[str, Any]:
    return {
        "Title": r.title,
        "Category": r.category,
        "Time Period": r.time_period,
        "Keywords": r.keywords,
        "Custodian": r.custodian,
        "Link": {"href": r.link, "label": "Open"} if r.link else None,
    }


def project(filtered: Sequence[NormalizedRecord], view: ViewMode, total: int) -> Dict[str, Any]:
    """Everything a front end needs to draw one result view."""
    if view == "table":
        items: List[Dict[str, Any]] = [table_row(r) for r in filtered]
        empty = NO_RESULTS_TABLE
    else:
        items = [card(r) for r in filtered]
        empty = NO_RESULTS_CARDS
    return {
        "total": total,
        "shown": len(filtered),
        "summary": summary_message(len(filtered), total),
        "view": view,
        "empty_message": empty if not filtered else None,
        "items": items,
    }
