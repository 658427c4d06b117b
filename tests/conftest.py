import os

import pytest

os.environ.setdefault("MAIN_TOKEN", "123456789:TEST-token-for-pytest")

from usage_bot.repos.chat_url import InMemoryChatUrlRepo  # noqa: E402

GIB = 1024 ** 3


@pytest.fixture
def chat_url_repo() -> InMemoryChatUrlRepo:
    return InMemoryChatUrlRepo()


@pytest.fixture
def summary_payload() -> dict:
    return {
        "monthly_bw_limit_b": 10 * GIB,
        "bw_counter_b": 5 * GIB,
        "bw_reset_day_of_month": 15,
    }


@pytest.fixture
async def usage_server(summary_payload):
    """Local HTTP endpoint serving well-formed, malformed and slow usage summaries."""
    import asyncio

    from aiohttp import web
    from aiohttp.test_utils import TestServer

    async def summary(request: web.Request) -> web.Response:
        return web.json_response(summary_payload)

    async def missing_reset_day(request: web.Request) -> web.Response:
        payload = dict(summary_payload)
        payload.pop("bw_reset_day_of_month")
        return web.json_response(payload)

    async def not_json(request: web.Request) -> web.Response:
        return web.Response(text="<html>maintenance</html>", content_type="text/html")

    async def slow(request: web.Request) -> web.Response:
        await asyncio.sleep(1)
        return web.json_response(summary_payload)

    app = web.Application()
    app.router.add_get("/summary", summary)
    app.router.add_get("/missing", missing_reset_day)
    app.router.add_get("/garbage", not_json)
    app.router.add_get("/slow", slow)

    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()
