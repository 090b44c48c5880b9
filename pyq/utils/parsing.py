import re
from typing import Any, Optional

LEADING_INT_PATTERN = re.compile(r'\s*([+-]?\d+)')

def parse_int(value: Any) -> Optional[int]:
    """Read the leading integer of a query value ("2020abc" -> 2020, "2.5" -> 2); None if there is none"""
    if value is None:
        return None
    match = LEADING_INT_PATTERN.match(str(value))
    return int(match.group(1)) if match else None
