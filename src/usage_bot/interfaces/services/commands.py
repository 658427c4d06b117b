from abc import ABC, abstractmethod

from usage_bot.schemas import BotCommandPayload


class AbcCommandService(ABC):
    @abstractmethod
    async def execute(self, chat_id: int, command: BotCommandPayload) -> str:
        """Run a parsed command for a chat and return the reply text."""
