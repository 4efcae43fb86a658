import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional
from .base import Normalizer
from .links import resolve_link
from .types import NormalizedRecord, RawRecord

log = logging.getLogger(__name__)

# Source headers, in the order they are tried
DESCRIPTION_FIELDS = ("Description", "Detailed Description", "Overview Description")
KEYWORDS_PREFIX = "keywords"

CITATION = "Citation"
TIME_PERIOD = "Time Period of Content"
CATEGORY = "Data Category"
CUSTODIAN = "Data Custodian"
EXTERNAL_REFERENCE = "External Metadata Reference"
POINT_OF_CONTACT = "Point of Contact"


class RuleNormalizer(Normalizer):
    """
    Rule-based normalizer:
    maps a raw metadata record with messy headers onto the
    fixed NormalizedRecord shape. Missing fields become "".
    """
    def normalize_record(self, title: str, rec: RawRecord) -> NormalizedRecord:
        if not isinstance(rec, Mapping):
            log.warning("record %r is not a mapping (%s); treating as empty",
                        title, type(rec).__name__)
            rec = {}

        kw_key = find_prefixed_key(rec, KEYWORDS_PREFIX)
        keywords = get_field(rec, kw_key) if kw_key is not None else ""

        return NormalizedRecord(
            id=title,
            title=title,
            citation=get_field(rec, CITATION),
            description=first_non_empty(rec, DESCRIPTION_FIELDS),
            time_period=get_field(rec, TIME_PERIOD),
            category=get_field(rec, CATEGORY),
            custodian=get_field(rec, CUSTODIAN),
            keywords=keywords,
            link=resolve_link(get_field(rec, EXTERNAL_REFERENCE),
                              get_field(rec, POINT_OF_CONTACT)),
            raw=dict(rec),
        )


def normalize(title: str, rec: RawRecord) -> NormalizedRecord:
    return RuleNormalizer().normalize_record(title, rec)


# --- Individual field helpers ---

def to_text(v: Any) -> str:
    """
    Coerce an optional scalar to trimmed text; None becomes "".
    JSON booleans render as "true"/"false" and whole floats drop ".0".
    """
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v).strip()

def get_field(rec: RawRecord, key: str) -> str:
    """Exact-key lookup, trimmed, "" when absent or null."""
    return to_text(rec.get(key))

def find_prefixed_key(rec: RawRecord, prefix: str) -> Optional[str]:
    """First key (in iteration order) whose lower-cased text starts with `prefix`."""
    for k in rec.keys():
        if str(k).lower().startswith(prefix):
            return k
    return None

def first_non_empty(rec: RawRecord, keys: Iterable[str]) -> str:
    """Value of the first key in `keys` that yields non-empty text."""
    for k in keys:
        v = get_field(rec, k)
        if v:
            return v
    return ""
