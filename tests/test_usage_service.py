import pytest

from usage_bot.errors import UsageDecodeError, UsageTimeoutError, UsageTransportError
from usage_bot.services.usage import UsageService


async def test_fetch_report(usage_server):
    service = UsageService(timeout=5)
    report = await service.fetch_report(str(usage_server.make_url("/summary")))

    assert report.used_gib == 5.0
    assert report.limit_gib == 10.0
    assert report.percent == 50.0
    assert report.reset_day == 15


async def test_fetch_report_text(usage_server):
    text = await UsageService().fetch_report_text(str(usage_server.make_url("/summary")))
    assert "5.000GiB / 10.000GiB" in text


async def test_missing_field_is_decode_error(usage_server):
    with pytest.raises(UsageDecodeError) as exc_info:
        await UsageService().fetch_report(str(usage_server.make_url("/missing")))

    assert "bw_reset_day_of_month" in exc_info.value.detail


async def test_non_json_body_is_decode_error(usage_server):
    with pytest.raises(UsageDecodeError) as exc_info:
        await UsageService().fetch_report(str(usage_server.make_url("/garbage")))

    assert exc_info.value.detail


async def test_http_error_status_is_transport_error(usage_server):
    with pytest.raises(UsageTransportError) as exc_info:
        await UsageService().fetch_report(str(usage_server.make_url("/nowhere")))

    assert "404" in exc_info.value.detail


async def test_connection_refused_is_transport_error(unused_tcp_port):
    with pytest.raises(UsageTransportError):
        await UsageService().fetch_report(f"http://127.0.0.1:{unused_tcp_port}/usage")


async def test_slow_endpoint_times_out(usage_server):
    service = UsageService(timeout=0.1)
    with pytest.raises(UsageTimeoutError):
        await service.fetch_report(str(usage_server.make_url("/slow")))
