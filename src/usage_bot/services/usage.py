import asyncio
import logging

from aiohttp import ClientError, ClientSession
from pydantic import ValidationError

from usage_bot.errors import UsageDecodeError, UsageTimeoutError, UsageTransportError
from usage_bot.interfaces.services.usage import AbcUsageService
from usage_bot.schemas import UsageReport, UsageSummary

logger = logging.getLogger(__name__)


class UsageService(AbcUsageService):
    def __init__(self, timeout: float = 5.0):
        self._timeout = timeout

    async def fetch_report(self, url: str) -> UsageReport:
        try:
            async with asyncio.timeout(self._timeout):
                body = await self._download(url)
                summary = self._decode(body)
        except TimeoutError as e:
            logger.warning(f"Timed out after {self._timeout}s fetching usage from {url}")
            raise UsageTimeoutError from e
        return UsageReport.from_summary(summary)

    async def fetch_report_text(self, url: str) -> str:
        report = await self.fetch_report(url)
        return report.render()

    @staticmethod
    async def _download(url: str) -> bytes:
        try:
            async with ClientSession() as session:
                async with session.get(url) as resp:
                    resp.raise_for_status()
                    return await resp.read()
        except (ClientError, ValueError) as e:
            # ServerTimeoutError is both a ClientError and a TimeoutError
            if isinstance(e, TimeoutError):
                raise
            logger.warning(f"Transport error fetching usage from {url}: {e!r}")
            raise UsageTransportError(str(e) or type(e).__name__) from e

    @staticmethod
    def _decode(body: bytes) -> UsageSummary:
        try:
            return UsageSummary.model_validate_json(body)
        except ValidationError as e:
            detail = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" if err["loc"] else err["msg"]
                for err in e.errors()
            )
            logger.warning(f"Malformed usage summary: {detail}")
            raise UsageDecodeError(detail) from e
