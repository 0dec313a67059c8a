from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Tuple

from cartview.config import settings


@dataclass(frozen=True)
class TotalsSummary:
    subtotal: Decimal
    tax: Decimal
    shipping_fee: Decimal
    grand_total: Decimal
    item_count: int


def round_money(v: Decimal) -> Decimal:
    return Decimal(v).quantize(Decimal(1).scaleb(-settings.decimals), rounding=ROUND_HALF_UP)


def shipping_for(subtotal: Decimal) -> Decimal:
    # free strictly above the threshold, flat fee at or below it
    if subtotal > settings.free_shipping_over:
        return Decimal(0)
    return settings.shipping_fee


def compute_totals(lines: Iterable[Tuple[Decimal, int]]) -> TotalsSummary:
    """
    lines: (unit_price, quantity) pairs.
    Everything is summed unrounded; rounding happens once at the end.
    Shipping is decided on the subtotal as displayed (rounded).
    """
    subtotal = Decimal(0)
    count = 0
    for price, qty in lines:
        subtotal += price * qty
        count += qty

    tax = subtotal * settings.tax_rate
    ship = shipping_for(round_money(subtotal))
    total = subtotal + tax + ship

    return TotalsSummary(
        subtotal=round_money(subtotal),
        tax=round_money(tax),
        shipping_fee=round_money(ship),
        grand_total=round_money(total),
        item_count=count,
    )
