import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.types import BotCommand
from dependency_injector.wiring import Provide, inject

from usage_bot.container import Container, lifecycle
from usage_bot.enums import COMMAND_DESCRIPTIONS
from usage_bot.handlers import router
from usage_bot.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL)

logger = logging.getLogger(__name__)


@inject
async def _run(
    bot: Bot = Provide[Container.bot],
    dp: Dispatcher = Provide[Container.dispatcher],
) -> None:
    dp.include_router(router)

    await bot.set_my_commands(
        [BotCommand(command=cmd, description=description) for cmd, description in COMMAND_DESCRIPTIONS.items()]
    )
    logger.info("start bot")
    try:
        await dp.start_polling(bot)
    finally:
        logger.info("stop bot")


async def main():
    async with lifecycle():
        await _run()


def start_bot():
    asyncio.run(main())
