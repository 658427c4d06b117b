class UsageFetchError(Exception):
    """Base class for failures while fetching a usage summary."""


class UsageTimeoutError(UsageFetchError):
    pass


class UsageTransportError(UsageFetchError):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class UsageDecodeError(UsageFetchError):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NoHistoryError(Exception):
    """Raised when a chat asks for /current before any successful /usage."""
    def __init__(self, chat_id: int):
        super().__init__(chat_id)
        self.chat_id = chat_id
