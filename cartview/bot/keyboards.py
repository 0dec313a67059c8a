from aiogram.types import KeyboardButton, ReplyKeyboardMarkup


def main_kb() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text="/cart"), KeyboardButton(text="/checkout")],
            [KeyboardButton(text="/help")],
        ],
        resize_keyboard=True,
    )
