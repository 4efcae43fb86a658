import re
from typing import Any

# Placeholder values the source uses instead of leaving the field blank
_PLACEHOLDER = re.compile(r"^\s*(NA or TBC|N/A)\s*$", re.IGNORECASE)


def is_usable_link(val: Any) -> bool:
    """True if `val` can be used as an outbound hyperlink."""
    if not isinstance(val, str) or not val:
        return False
    if not val.strip().startswith("http"):
        return False
    return not _PLACEHOLDER.match(val)


def resolve_link(primary: Any, secondary: Any) -> str:
    """Pick the first usable link of the two candidates, else ""."""
    if is_usable_link(primary):
        return primary
    if is_usable_link(secondary):
        return secondary
    return ""
