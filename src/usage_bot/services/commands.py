import logging

from usage_bot.errors import NoHistoryError, UsageFetchError, UsageTimeoutError
from usage_bot.interfaces.repos.chat_url import AbcChatUrlRepo
from usage_bot.interfaces.services.commands import AbcCommandService
from usage_bot.interfaces.services.usage import AbcUsageService
from usage_bot.schemas import BotCommandPayload, CurrentCommand, UsageCommand

logger = logging.getLogger(__name__)

TIMEOUT_TEXT = "获取流量信息超时"
FETCH_ERROR_TEXT = "获取流量信息时发生错误：{detail}"
NO_HISTORY_TEXT = "没有历史URL可用"


def render_error(error: UsageFetchError | NoHistoryError) -> str:
    match error:
        case UsageTimeoutError():
            return TIMEOUT_TEXT
        case NoHistoryError():
            return NO_HISTORY_TEXT
        case _:
            return FETCH_ERROR_TEXT.format(detail=error.detail)


class CommandService(AbcCommandService):
    def __init__(self, usage_service: AbcUsageService, chat_url_repo: AbcChatUrlRepo):
        self._usage = usage_service
        self._urls = chat_url_repo

    async def execute(self, chat_id: int, command: BotCommandPayload) -> str:
        try:
            match command:
                case UsageCommand(url=url):
                    return await self._usage_command(chat_id, url)
                case CurrentCommand():
                    return await self._current_command(chat_id)
                case _:
                    raise TypeError(f"Unsupported command: {command!r}")
        except (UsageFetchError, NoHistoryError) as e:
            return render_error(e)

    async def _usage_command(self, chat_id: int, url: str) -> str:
        report = await self._usage.fetch_report(url)
        self._urls.put(chat_id, url)
        logger.info(f"Remembered usage URL for chat {chat_id}")
        return report.render()

    async def _current_command(self, chat_id: int) -> str:
        url = self._urls.get(chat_id)
        if url is None:
            raise NoHistoryError(chat_id)
        report = await self._usage.fetch_report(url)
        return report.render()
