from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from usage_bot.enums import COMMAND_DESCRIPTIONS, BotCommandEnum

router = Router()


def help_text() -> str:
    lines = ["可利用的命令："]
    lines += [f"/{cmd} — {description}" for cmd, description in COMMAND_DESCRIPTIONS.items()]
    lines.append("")
    lines.append("示例：/usage https://example.com/usage.json")
    return "\n".join(lines)


@router.message(CommandStart())
@router.message(Command(BotCommandEnum.help))
async def help_handler(message: Message):
    await message.answer(help_text())
