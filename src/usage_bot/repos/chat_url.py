import threading

from usage_bot.interfaces.repos.chat_url import AbcChatUrlRepo


class InMemoryChatUrlRepo(AbcChatUrlRepo):
    def __init__(self):
        self._urls: dict[int, str] = {}
        self._lock = threading.Lock()

    def put(self, chat_id: int, url: str) -> None:
        with self._lock:
            self._urls[chat_id] = url

    def get(self, chat_id: int) -> str | None:
        with self._lock:
            return self._urls.get(chat_id)
