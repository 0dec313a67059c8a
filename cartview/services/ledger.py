from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from cartview.constants import QTY_MAX
from cartview.services.pricing import TotalsSummary, compute_totals
from cartview.utils.validators import parse_price, parse_quantity, require_quantity

logger = logging.getLogger(__name__)


@dataclass
class LineItem:
    id: str
    name: str
    color_variant: str
    unit_price: Decimal
    quantity: int
    image_ref: str = ""
    detail_link: str = ""

    def __post_init__(self) -> None:
        if not str(self.id).strip():
            raise ValueError("id must not be empty")
        self.id = str(self.id)
        self.unit_price = parse_price(self.unit_price)
        require_quantity(self.quantity)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineItem":
        return cls(
            id=data["id"],
            name=data["name"],
            color_variant=data.get("color_variant", ""),
            unit_price=data["unit_price"],
            quantity=data.get("quantity", 1),
            image_ref=data.get("image_ref", ""),
            detail_link=data.get("detail_link", ""),
        )


class CartLedger:
    """
    Ordered, id-unique collection of line items.

    Mutations never raise on bad input: unknown ids and unusable
    quantities are dropped and reported through the return value.
    """

    def __init__(self, items: Iterable[LineItem] = ()) -> None:
        self._items: List[LineItem] = []
        for it in items:
            if self.get(it.id) is not None:
                raise ValueError(f"duplicate line item id: {it.id}")
            self._items.append(it)

    @classmethod
    def from_seed(cls, seed: Iterable[Dict[str, Any]]) -> "CartLedger":
        return cls(LineItem.from_dict(row) for row in seed)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self._items)

    @property
    def items(self) -> Tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def ids(self) -> List[str]:
        return [it.id for it in self._items]

    def get(self, item_id: str) -> Optional[LineItem]:
        for it in self._items:
            if it.id == item_id:
                return it
        return None

    def set_quantity(self, item_id: str, new_quantity: Any) -> bool:
        item = self.get(item_id)
        if item is None:
            logger.debug("set_quantity ignored: unknown id %r", item_id)
            return False

        qty = parse_quantity(new_quantity)
        if qty is None or qty < 1:
            logger.debug("set_quantity ignored: bad value %r for %s", new_quantity, item_id)
            return False

        qty = min(qty, QTY_MAX)
        if qty == item.quantity:
            return False

        item.quantity = qty
        logger.debug("quantity of %s set to %d", item_id, qty)
        return True

    def remove_item(self, item_id: str) -> bool:
        for i, it in enumerate(self._items):
            if it.id == item_id:
                del self._items[i]
                logger.debug("removed %s", item_id)
                return True
        logger.debug("remove_item ignored: unknown id %r", item_id)
        return False

    def compute_totals(self) -> TotalsSummary:
        return compute_totals((it.unit_price, it.quantity) for it in self._items)
