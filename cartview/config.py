from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../cartview project root
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_decimal(*keys: str, default: str) -> Decimal:
    v = _get_env(*keys, default=default)
    try:
        return Decimal(str(v).replace(",", "."))
    except InvalidOperation:
        raise RuntimeError(f"{keys[0]} is not a number: {v!r}")


@dataclass(frozen=True)
class Settings:
    bot_token: str
    currency: str
    decimals: int
    tax_rate: Decimal
    free_shipping_over: Decimal
    shipping_fee: Decimal
    log_level: str
    max_sessions: int


settings = Settings(
    bot_token=_get_env("BOT_TOKEN", "TELEGRAM_BOT_TOKEN", default="") or "",
    currency=_get_env("CURRENCY", default="USD") or "USD",
    decimals=_get_int("DECIMALS", default=2) or 2,
    tax_rate=_get_decimal("TAX_RATE", default="0.08"),
    free_shipping_over=_get_decimal("FREE_SHIPPING_OVER", default="100"),
    shipping_fee=_get_decimal("SHIPPING_FEE", default="10"),
    log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
    max_sessions=_get_int("MAX_SESSIONS", default=1000) or 1000,
)
