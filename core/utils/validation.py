"""
Small input validators shared by services and routes.
"""

import re
from typing import Any, Optional

_NUMERIC_ID = re.compile(r"[0-9]+")


def is_numeric_id(value: str) -> bool:
    """True for plain ASCII digit strings like '12345'"""
    return bool(value) and _NUMERIC_ID.fullmatch(value) is not None


def parse_numeric_id(value: Any) -> Optional[int]:
    """Coerce an int or digit string to int; None for anything else"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and is_numeric_id(value.strip()):
        return int(value.strip())
    return None
