from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from cartview.constants import QTY_MAX, QTY_MIN

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def require_non_negative(v: Decimal, name: str = "value") -> None:
    if v < 0:
        raise ValueError(f"{name} must be >= 0")


def parse_price(v: Any, name: str = "unit_price") -> Decimal:
    # via str so float seeds keep their printed value
    try:
        d = Decimal(str(v).strip())
    except InvalidOperation:
        raise ValueError(f"{name} is not a number: {v!r}")
    if not d.is_finite():
        raise ValueError(f"{name} must be a finite number")
    require_non_negative(d, name)
    return d


def require_quantity(v: int, name: str = "quantity") -> None:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"{name} must be an integer")
    if not QTY_MIN <= v <= QTY_MAX:
        raise ValueError(f"{name} must be between {QTY_MIN} and {QTY_MAX}")


def parse_quantity(raw: Any) -> Optional[int]:
    """
    Read a quantity the way a number input hands it over.
    Leading integer digits win ("4.7" -> 4), anything else -> None.
    Digit runs wider than QTY_MAX come back as +/-QTY_MAX without int().
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    m = _LEADING_INT.match(str(raw))
    if not m:
        return None
    text = m.group(1)
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > len(str(QTY_MAX)):
        return -QTY_MAX if text.startswith("-") else QTY_MAX
    value = int(digits) if digits else 0
    return -value if text.startswith("-") else value
