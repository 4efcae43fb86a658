from .rules import RuleNormalizer, normalize
from .links import resolve_link, is_usable_link
from .types import NormalizedRecord, RawRecord
from .base import Normalizer


def get_default_normalizer() -> Normalizer:
    """Factory for the normalizer used when building a catalog."""
    return RuleNormalizer()


__all__ = [
    "get_default_normalizer",
    "RuleNormalizer",
    "normalize",
    "resolve_link",
    "is_usable_link",
    "NormalizedRecord",
    "RawRecord",
    "Normalizer",
]
