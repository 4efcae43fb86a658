import logging
import unicodedata
from typing import Dict, Iterable, List, Mapping, Optional

from app.normalizers import get_default_normalizer, Normalizer, NormalizedRecord, RawRecord

log = logging.getLogger(__name__)


def build_collection(
    raw: Mapping[str, RawRecord], normalizer: Optional[Normalizer] = None
) -> List[NormalizedRecord]:
    """
    Normalize every entry of the raw collection (title -> record).
    Output order follows the raw mapping's iteration order.
    """
    normalizer = normalizer or get_default_normalizer()
    out: List[NormalizedRecord] = []
    for title, rec in raw.items():
        norm = normalizer.normalize_record(title, rec)
        if not norm.link:
            log.debug("no usable link for record %r", title)
        out.append(norm)
    return out


def _collation_key(s: str):
    # base letters first, then accents, then case (lowercase before uppercase)
    decomposed = unicodedata.normalize("NFKD", s)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), s.casefold(), s.swapcase())

def _distinct(values: Iterable[str]) -> List[str]:
    return sorted({v for v in values if v}, key=_collation_key)

def distinct_categories(collection: Iterable[NormalizedRecord]) -> List[str]:
    """Sorted distinct non-empty categories, for populating filter choices."""
    return _distinct(r.category for r in collection)

def distinct_time_periods(collection: Iterable[NormalizedRecord]) -> List[str]:
    """Sorted distinct non-empty time periods, for populating filter choices."""
    return _distinct(r.time_period for r in collection)


class Catalog:
    """
    The normalized collection plus the facet values derived from it.
    Built once at load time and read-only afterwards.
    """
    def __init__(self, records: List[NormalizedRecord]):
        self.records = tuple(records)
        self.categories = distinct_categories(self.records)
        self.time_periods = distinct_time_periods(self.records)
        self._by_id: Dict[str, NormalizedRecord] = {r.id: r for r in self.records}

    @classmethod
    def from_raw(cls, raw: Mapping[str, RawRecord], normalizer: Optional[Normalizer] = None) -> "Catalog":
        cat = cls(build_collection(raw, normalizer=normalizer))
        log.info("catalog built: records=%d categories=%d time_periods=%d",
                 cat.total, len(cat.categories), len(cat.time_periods))
        return cat

    @property
    def total(self) -> int:
        return len(self.records)

    def get(self, record_id: str) -> Optional[NormalizedRecord]:
        return self._by_id.get(record_id)

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)
