"""
Pure projection of a cart ledger into what the page and the bot display.
Nothing here mutates the ledger.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from cartview.constants import EMPTY_CART_TEXT, QTY_MAX, QTY_MIN
from cartview.services.ledger import CartLedger
from cartview.services.pricing import TotalsSummary
from cartview.utils.formatters import money, shipping


@dataclass(frozen=True)
class ItemRow:
    id: str
    name: str
    color_variant: str
    quantity: int
    unit_price: str
    line_total: str
    image_ref: str
    detail_link: str
    qty_min: int = QTY_MIN
    qty_max: int = QTY_MAX


@dataclass(frozen=True)
class SummaryPanel:
    item_count: int
    subtotal: str
    tax: str
    shipping: str
    total: str


@dataclass(frozen=True)
class Badge:
    count: int

    @property
    def visible(self) -> bool:
        return self.count > 0


@dataclass(frozen=True)
class CartView:
    rows: List[ItemRow] = field(default_factory=list)
    summary: Optional[SummaryPanel] = None
    badge: Badge = Badge(0)
    empty_text: str = EMPTY_CART_TEXT

    @property
    def empty(self) -> bool:
        return not self.rows


def summary_panel(totals: TotalsSummary) -> SummaryPanel:
    return SummaryPanel(
        item_count=totals.item_count,
        subtotal=money(totals.subtotal),
        tax=money(totals.tax),
        shipping=shipping(totals.shipping_fee),
        total=money(totals.grand_total),
    )


def project(ledger: CartLedger) -> CartView:
    if len(ledger) == 0:
        return CartView()

    rows = [
        ItemRow(
            id=it.id,
            name=it.name,
            color_variant=it.color_variant,
            quantity=it.quantity,
            unit_price=money(it.unit_price),
            line_total=money(it.line_total),
            image_ref=it.image_ref,
            detail_link=it.detail_link,
        )
        for it in ledger
    ]
    totals = ledger.compute_totals()
    return CartView(rows=rows, summary=summary_panel(totals), badge=Badge(totals.item_count))
