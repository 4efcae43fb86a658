# app/normalizers/types.py
from typing import Any, Dict, Mapping
from pydantic import BaseModel, ConfigDict

# A raw metadata record: field name -> scalar value, no fixed schema
RawRecord = Mapping[str, Any]


class NormalizedRecord(BaseModel):
    """Fixed-shape view of one metadata record. Built once, never mutated."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    citation: str = ""
    description: str = ""
    time_period: str = ""
    category: str = ""
    custodian: str = ""
    keywords: str = ""
    link: str = ""
    raw: Dict[str, Any] = {}   # source fields, kept for traceability only
