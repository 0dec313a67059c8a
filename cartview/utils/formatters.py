from decimal import Decimal

from cartview.config import settings
from cartview.constants import CURRENCY_SYMBOLS, FREE_SHIPPING_TEXT
from cartview.services.pricing import round_money


def money(v: Decimal) -> str:
    symbol = CURRENCY_SYMBOLS.get(settings.currency)
    amount = f"{round_money(v):.{settings.decimals}f}"
    if symbol:
        return f"{symbol}{amount}"
    return f"{amount} {settings.currency}"


def shipping(v: Decimal) -> str:
    if round_money(v) == 0:
        return FREE_SHIPPING_TEXT
    return money(v)
