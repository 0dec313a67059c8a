from html import escape

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from cartview.bot.keyboards import main_kb
from cartview.services.synchronizer import CartSessions, CartSynchronizer
from cartview.services.view import CartView

router = Router()

HELP_TEXT = (
    "<b>Cart — commands</b>\n\n"
    "/cart — show the cart\n"
    "/qty ITEM_ID N — change quantity (1..10)\n"
    "/remove ITEM_ID — remove an item\n"
    "/checkout — order total\n"
    "/help — this help\n"
)


def cart_text(view: CartView) -> str:
    if view.empty:
        return f"🛒 {escape(view.empty_text)}"

    lines = [f"<b>My Cart</b> ({view.badge.count})", ""]
    for row in view.rows:
        lines.append(f"• <b>{escape(row.name)}</b>")
        lines.append(f"  {escape(row.color_variant)}")
        lines.append(f"  <code>{escape(row.id)}</code> | {row.quantity} × {row.unit_price} = {row.line_total}")
    s = view.summary
    lines.append("")
    lines.append(f"Subtotal ({s.item_count} items): {s.subtotal}")
    lines.append(f"Tax: {s.tax}")
    lines.append(f"Shipping: {s.shipping}")
    lines.append(f"<b>Total: {s.total}</b>")
    return "\n".join(lines)


def _cart(message: Message, sessions: CartSessions) -> CartSynchronizer:
    return sessions.get(message.from_user.id)


def _args(message: Message) -> list[str]:
    return (message.text or "").split()[1:]


@router.message(Command("start"))
async def cmd_start(message: Message, sessions: CartSessions):
    sync = _cart(message, sessions)
    await message.answer(cart_text(sync.view), reply_markup=main_kb())


@router.message(Command("help"))
async def cmd_help(message: Message):
    await message.answer(HELP_TEXT)


@router.message(Command("cart"))
async def cmd_cart(message: Message, sessions: CartSessions):
    sync = _cart(message, sessions)
    await message.answer(cart_text(sync.view))


@router.message(Command("qty"))
async def cmd_qty(message: Message, sessions: CartSessions):
    sync = _cart(message, sessions)
    args = _args(message)
    if len(args) < 2:
        await message.answer("Format: /qty ITEM_ID N")
        return
    # bad ids and values are dropped quietly, the cart is shown as is
    sync.set_quantity(args[0], args[1])
    await message.answer(cart_text(sync.view))


@router.message(Command("remove"))
async def cmd_remove(message: Message, sessions: CartSessions):
    sync = _cart(message, sessions)
    args = _args(message)
    if not args:
        await message.answer("Format: /remove ITEM_ID")
        return
    sync.remove_item(args[0])
    await message.answer(cart_text(sync.view))


@router.message(Command("checkout"))
async def cmd_checkout(message: Message, sessions: CartSessions):
    sync = _cart(message, sessions)
    await message.answer(escape(sync.checkout()))
