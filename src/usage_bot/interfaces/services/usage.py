from abc import ABC, abstractmethod

from usage_bot.schemas import UsageReport


class AbcUsageService(ABC):
    @abstractmethod
    async def fetch_report(self, url: str) -> UsageReport:
        """Fetch the usage summary behind `url` and turn it into a report.

        Raises a subclass of UsageFetchError on timeout, transport or decode failure.
        """
