# app/normalizers/base.py
from typing import Protocol
from .types import NormalizedRecord, RawRecord

class Normalizer(Protocol):
    def normalize_record(self, title: str, rec: RawRecord) -> NormalizedRecord:
        """Return a NEW normalized record. Do not mutate `rec`."""
        ...
