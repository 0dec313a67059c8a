import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from cartview.bot.handlers import router
from cartview.config import settings
from cartview.services.synchronizer import CartSessions


def build_dispatcher(sessions: CartSessions) -> Dispatcher:
    dp = Dispatcher(sessions=sessions)
    dp.include_router(router)
    return dp


async def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if not settings.bot_token:
        raise RuntimeError("BOT_TOKEN is empty. Set BOT_TOKEN in .env")

    bot = Bot(token=settings.bot_token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
    dp = build_dispatcher(CartSessions())

    await dp.start_polling(bot)

if __name__ == "__main__":
    asyncio.run(main())
