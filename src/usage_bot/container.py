from contextlib import asynccontextmanager
from typing import AsyncIterator

from aiogram import Bot, Dispatcher
from dependency_injector import containers, providers

from usage_bot.repos.chat_url import InMemoryChatUrlRepo
from usage_bot.services.commands import CommandService
from usage_bot.services.usage import UsageService
from usage_bot.settings import settings


class Container(containers.DeclarativeContainer):
    bot = providers.Singleton(Bot, token=settings.MAIN_TOKEN)
    dispatcher = providers.Singleton(Dispatcher)
    chat_url_repo = providers.Singleton(InMemoryChatUrlRepo)
    usage_service = providers.Factory(UsageService, timeout=settings.FETCH_TIMEOUT)
    command_service = providers.Factory(CommandService, usage_service=usage_service, chat_url_repo=chat_url_repo)


@asynccontextmanager
async def lifecycle() -> AsyncIterator[Container]:
    _container = Container()
    _container.wire(modules=["usage_bot.main"], packages=["usage_bot.handlers"])
    try:
        yield _container
    finally:
        _container.unwire()
