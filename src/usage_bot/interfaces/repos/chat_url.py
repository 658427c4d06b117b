from abc import ABC, abstractmethod


class AbcChatUrlRepo(ABC):
    """Last successfully used usage URL per chat."""

    @abstractmethod
    def put(self, chat_id: int, url: str) -> None:
        ...

    @abstractmethod
    def get(self, chat_id: int) -> str | None:
        ...
