import logging

from aiogram import Router
from aiogram.filters import Command, CommandObject
from aiogram.types import Message
from dependency_injector.wiring import inject, Provide

from usage_bot.container import Container
from usage_bot.enums import BotCommandEnum
from usage_bot.interfaces.services.commands import AbcCommandService
from usage_bot.schemas import CurrentCommand, UsageCommand

logger = logging.getLogger(__name__)

router = Router()

USAGE_HINT = "请提供URL，例如：/usage https://example.com/usage.json"


def clean_url(raw: str | None) -> str:
    """Strip whitespace and quoting that chat clients tend to add around the URL."""
    if not raw:
        return ""
    return raw.strip().strip("\"'`").strip()


@router.message(Command(BotCommandEnum.usage))
@inject
async def usage_handler(
    message: Message,
    command: CommandObject,
    command_service: AbcCommandService = Provide[Container.command_service],
):
    logger.debug(f"Received /usage from chat {message.chat.id}")
    url = clean_url(command.args)
    if not url:
        await message.answer(USAGE_HINT)
        return
    text = await command_service.execute(message.chat.id, UsageCommand(url=url))
    await message.answer(text)


@router.message(Command(BotCommandEnum.current))
@inject
async def current_handler(
    message: Message,
    command_service: AbcCommandService = Provide[Container.command_service],
):
    logger.debug(f"Received /current from chat {message.chat.id}")
    text = await command_service.execute(message.chat.id, CurrentCommand())
    await message.answer(text)
