"""Tests for bot handlers"""
from unittest.mock import AsyncMock, Mock

import pytest
from aiogram.types import Chat, Message, User as TgUser

from cartview.bot.handlers import (
    cart_text,
    cmd_cart,
    cmd_checkout,
    cmd_help,
    cmd_qty,
    cmd_remove,
    cmd_start,
)
from cartview.main import build_dispatcher
from cartview.services.ledger import CartLedger
from cartview.services.synchronizer import CartSessions
from cartview.services.view import project

from conftest import make_item



@pytest.fixture
def sessions():
    return CartSessions()


@pytest.fixture
def mock_message():
    """Mock Telegram message"""
    message = Mock(spec=Message)
    message.from_user = Mock(spec=TgUser)
    message.from_user.id = 123456789
    message.chat = Mock(spec=Chat)
    message.chat.id = 123456789
    message.text = "/cart"
    message.answer = AsyncMock()
    return message


def _reply(message) -> str:
    return message.answer.call_args[0][0]


def test_cart_text_lists_items_and_totals(two_tents):
    text = cart_text(project(two_tents))

    assert "<b>My Cart</b> (2)" in text
    assert "Item a" in text
    assert "Shipping: FREE" in text
    assert "<b>Total: $388.78</b>" in text


def test_cart_text_empty():
    text = cart_text(project(CartLedger()))

    assert "Your cart is empty" in text
    assert "Total" not in text


def test_cart_text_escapes_names():
    ledger = CartLedger([make_item("x", "5.00", name="Tarp <2m>")])

    assert "Tarp &lt;2m&gt;" in cart_text(project(ledger))


@pytest.mark.asyncio
async def test_cmd_start_shows_seed_cart(mock_message, sessions):
    mock_message.text = "/start"
    await cmd_start(mock_message, sessions)

    mock_message.answer.assert_called_once()
    assert "Marmot Ajax Tent" in _reply(mock_message)
    assert mock_message.answer.call_args.kwargs["reply_markup"] is not None


@pytest.mark.asyncio
async def test_cmd_help(mock_message):
    await cmd_help(mock_message)

    assert "/qty" in _reply(mock_message)


@pytest.mark.asyncio
async def test_cmd_cart(mock_message, sessions):
    await cmd_cart(mock_message, sessions)

    assert "<b>Total: $1036.76</b>" in _reply(mock_message)


@pytest.mark.asyncio
async def test_cmd_qty_updates(mock_message, sessions):
    mock_message.text = "/qty kelty-discovery-4 3"
    await cmd_qty(mock_message, sessions)

    assert sessions.get(123456789).ledger.get("kelty-discovery-4").quantity == 3
    assert "(6)" in _reply(mock_message)


@pytest.mark.asyncio
async def test_cmd_qty_invalid_is_silent(mock_message, sessions):
    mock_message.text = "/qty kelty-discovery-4 zero"
    await cmd_qty(mock_message, sessions)

    assert sessions.get(123456789).ledger.get("kelty-discovery-4").quantity == 1
    assert "(4)" in _reply(mock_message)


@pytest.mark.asyncio
async def test_cmd_qty_usage(mock_message, sessions):
    mock_message.text = "/qty"
    await cmd_qty(mock_message, sessions)

    assert _reply(mock_message).startswith("Format:")


@pytest.mark.asyncio
async def test_cmd_remove(mock_message, sessions):
    mock_message.text = "/remove north-face-talus-4"
    await cmd_remove(mock_message, sessions)

    assert sessions.get(123456789).ledger.ids == ["marmot-ajax-3", "kelty-discovery-4"]
    assert "North Face" not in _reply(mock_message)


@pytest.mark.asyncio
async def test_cmd_checkout_keeps_cart(mock_message, sessions):
    mock_message.text = "/checkout"
    await cmd_checkout(mock_message, sessions)

    reply = _reply(mock_message)
    assert "Thank you for your order!" in reply
    assert "Total: $1036.76" in reply
    assert "Items: 4" in reply
    assert len(sessions.get(123456789).ledger) == 3


def test_dispatcher_carries_sessions(sessions):
    dp = build_dispatcher(sessions)

    assert dp["sessions"] is sessions
