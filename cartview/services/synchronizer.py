from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional

from cartview.config import settings
from cartview.constants import SEED_CART
from cartview.services.ledger import CartLedger
from cartview.services.pricing import TotalsSummary
from cartview.services.view import CartView, project
from cartview.utils.formatters import money

logger = logging.getLogger(__name__)

Listener = Callable[[CartView], None]


class CartSynchronizer:
    """
    Owns one cart and keeps its displayed view in step with it.

    Every mutation that changes the ledger re-projects the whole view
    (no diffing) and pushes it to the registered listeners. `view` always
    holds the latest projection.
    """

    def __init__(self, ledger: CartLedger, listeners: Iterable[Listener] = ()) -> None:
        self.ledger = ledger
        self._listeners: List[Listener] = list(listeners)
        self.view: CartView = CartView()
        self.refresh()

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)
        listener(self.view)

    def refresh(self) -> CartView:
        self.view = project(self.ledger)
        for listener in self._listeners:
            listener(self.view)
        return self.view

    # alias kept for callers that think in terms of "render"
    render_view = refresh

    def set_quantity(self, item_id: str, new_quantity: Any) -> bool:
        changed = self.ledger.set_quantity(item_id, new_quantity)
        if changed:
            self.refresh()
        return changed

    def remove_item(self, item_id: str) -> bool:
        removed = self.ledger.remove_item(item_id)
        if removed:
            self.refresh()
        return removed

    def compute_totals(self) -> TotalsSummary:
        return self.ledger.compute_totals()

    def checkout(self) -> str:
        totals = self.compute_totals()
        logger.info("checkout: total=%s items=%d", totals.grand_total, totals.item_count)
        return (
            "Thank you for your order!\n"
            f"Total: {money(totals.grand_total)}\n"
            f"Items: {totals.item_count}"
        )


class CartSessions:
    """
    Session key -> synchronizer. Carts live only as long as the process.

    Holds at most `max_sessions` carts; the least recently used one is
    evicted when a new cart would go over the limit.
    """

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None, max_sessions: Optional[int] = None) -> None:
        self._seed = SEED_CART if seed is None else seed
        self._max = settings.max_sessions if max_sessions is None else max_sessions
        self._carts: OrderedDict[Hashable, CartSynchronizer] = OrderedDict()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._carts

    def __len__(self) -> int:
        return len(self._carts)

    def fresh(self) -> CartSynchronizer:
        """A seeded cart that is not registered under any key."""
        return CartSynchronizer(CartLedger.from_seed(self._seed))

    def peek(self, key: Optional[Hashable]) -> Optional[CartSynchronizer]:
        sync = self._carts.get(key) if key is not None else None
        if sync is not None:
            self._carts.move_to_end(key)
        return sync

    def get(self, key: Hashable) -> CartSynchronizer:
        sync = self.peek(key)
        if sync is None:
            sync = self.fresh()
            self._carts[key] = sync
            logger.debug("new cart session %s", key)
            while len(self._carts) > self._max:
                old, _ = self._carts.popitem(last=False)
                logger.debug("evicted cart session %s", old)
        return sync
