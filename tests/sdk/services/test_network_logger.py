import logging

import httpx
import pytest

from netrouter import DefaultNetworkLogger, EndpointSpec, HttpMethod, NullNetworkLogger


@pytest.fixture
def endpoint() -> EndpointSpec:
    return EndpointSpec(
        base_url="https://api.example.com",
        path="/items",
        http_method=HttpMethod.POST,
        url_parameters={"q": "shoes"},
        base_headers={"Authorization": "Bearer token"},
        additional_headers={"X-Trace": "abc"},
        body_parameters={"name": "boot", "size": 42},
    )


class TestDefaultNetworkLogger:
    def test_log_request(
        self, endpoint: EndpointSpec, caplog: pytest.LogCaptureFixture
    ):
        caplog.set_level(logging.INFO, logger="netrouter")

        DefaultNetworkLogger().log_request(endpoint)

        assert "OUTGOING" in caplog.text
        assert "https://api.example.com/items?q=shoes" in caplog.text
        assert "POST /items?q=shoes HTTP/1.1" in caplog.text
        assert "HOST: api.example.com" in caplog.text
        assert "Authorization: Bearer token" in caplog.text
        assert "X-Trace: abc" in caplog.text
        assert "    name: boot" in caplog.text
        assert "    size: 42" in caplog.text
        assert "END" in caplog.text

    def test_log_request_skips_unbuildable_url(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.INFO, logger="netrouter")

        DefaultNetworkLogger().log_request(EndpointSpec(base_url="nope"))

        assert caplog.records == []

    def test_log_response_pretty_prints_json(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.INFO, logger="netrouter")
        response = httpx.Response(
            201,
            json={"id": 1, "name": "x"},
            request=httpx.Request("POST", "https://api.example.com/items?q=shoes"),
        )

        DefaultNetworkLogger().log_response(response, response.content)

        assert "INCOMING" in caplog.text
        assert "201 /items?q=shoes HTTP/1.1" in caplog.text
        assert "HOST: api.example.com" in caplog.text
        assert '"name": "x"' in caplog.text

    def test_log_response_with_non_json_body(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.INFO, logger="netrouter")
        response = httpx.Response(
            200,
            content=b"<html/>",
            request=httpx.Request("GET", "https://api.example.com/"),
        )

        DefaultNetworkLogger().log_response(response, response.content)

        assert "200 /? HTTP/1.1" in caplog.text
        assert "<html/>" not in caplog.text

    def test_log_response_without_response(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.INFO, logger="netrouter")

        DefaultNetworkLogger().log_response(None, None)

        assert "INCOMING" in caplog.text

    def test_custom_logger_and_level(self, endpoint: EndpointSpec, caplog: pytest.LogCaptureFixture):
        custom = logging.getLogger("tests.network")
        caplog.set_level(logging.DEBUG, logger="tests.network")

        DefaultNetworkLogger(logger=custom, level=logging.DEBUG).log_request(endpoint)

        assert caplog.records[0].name == "tests.network"
        assert caplog.records[0].levelno == logging.DEBUG

    def test_disabled_level_logs_nothing(
        self, endpoint: EndpointSpec, caplog: pytest.LogCaptureFixture
    ):
        caplog.set_level(logging.WARNING, logger="netrouter")

        DefaultNetworkLogger().log_request(endpoint)

        assert caplog.records == []


class TestNullNetworkLogger:
    def test_records_nothing(self, endpoint: EndpointSpec, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG)

        NullNetworkLogger().log_request(endpoint)
        NullNetworkLogger().log_response(None, None)

        assert caplog.records == []
