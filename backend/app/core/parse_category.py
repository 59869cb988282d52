"""Category Query Parsing — map the ``cat`` query parameter to a tag.

Invariants:
    - Only base-10 integers (optional sign, digits only) are accepted
    - Values outside the signed 64-bit range are rejected
    - The tag is the canonical decimal form: "+01" → "1", "-0" → "0"
    - Anything else (missing, empty, "abc", " 1", "1_0") → None (list all)
"""

import re

from app.core.domain_types import CategoryTag

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def parse_category(raw: str | None) -> CategoryTag | None:
    """Return the category tag for ``raw``, or None to list everything."""
    if raw is None or not _INTEGER.fullmatch(raw):
        return None
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return CategoryTag(str(value))
