"""Pytest configuration and fixtures"""
import os

import pytest

# pin pricing config so a local .env can't skew the numbers
os.environ["CURRENCY"] = "USD"
os.environ["DECIMALS"] = "2"
os.environ["TAX_RATE"] = "0.08"
os.environ["FREE_SHIPPING_OVER"] = "100"
os.environ["SHIPPING_FEE"] = "10"

from cartview.services.ledger import CartLedger, LineItem  # noqa: E402
from cartview.services.synchronizer import CartSynchronizer  # noqa: E402


def make_item(item_id: str, price: str, qty: int = 1, **kwargs) -> LineItem:
    return LineItem(
        id=item_id,
        name=kwargs.get("name", f"Item {item_id}"),
        color_variant=kwargs.get("color_variant", "Orange/Gray"),
        unit_price=price,
        quantity=qty,
        image_ref=kwargs.get("image_ref", f"images/{item_id}.jpg"),
        detail_link=kwargs.get("detail_link", f"product_pages/{item_id}.html"),
    )


@pytest.fixture
def two_tents():
    """Item A 199.99 x1 and item B 159.99 x1"""
    return CartLedger([make_item("a", "199.99"), make_item("b", "159.99")])


@pytest.fixture
def single_item():
    """One item at 50.00"""
    return CartLedger([make_item("solo", "50.00")])


@pytest.fixture
def sync(two_tents):
    return CartSynchronizer(two_tents)
