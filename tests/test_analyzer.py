"""Tests for the performance analyzer."""

import json
import random

import pytest

from perf_analyzer.engine.analyzer import PerformanceAnalyzer, resource_type_for
from perf_analyzer.engine.fetcher import HttpResponse
from perf_analyzer.engine.models import PerformanceLevel
from perf_analyzer.errors import AnalysisError, TransportError, ValidationError
from perf_analyzer.utils.constants import API_ACCEPT

from .conftest import FakeHttpClient, SAMPLE_HTML, html_response


def make_analyzer(client, **kwargs):
    return PerformanceAnalyzer(http_client=client, rng=random.Random(42), **kwargs)


class TestAnalyzePage:
    """Test page analysis."""

    @pytest.mark.asyncio
    async def test_measured_page(self):
        client = FakeHttpClient(html_response())
        metrics = await make_analyzer(client).analyze_page("https://example.com/")

        body_size = len(SAMPLE_HTML.encode("utf-8"))
        assert metrics.simulated is False
        assert metrics.request_count == len(metrics.resources) == 6
        assert metrics.resources[0].type == "document"
        assert metrics.resources[0].name == "https://example.com/"
        assert metrics.resources[0].size == body_size
        assert metrics.resources[0].duration == metrics.load_time
        assert metrics.page_size == round(body_size / 1024)
        assert metrics.url == "https://example.com/"
        assert metrics.timestamp is not None
        assert len(client.calls) == 1

    @pytest.mark.asyncio
    async def test_page_size_uses_raw_bytes(self):
        html = "<p>" + "é" * 2048 + "</p>"
        client = FakeHttpClient(html_response(html))
        metrics = await make_analyzer(client).analyze_page("https://example.com/")

        assert metrics.resources[0].size == len(html.encode("utf-8"))
        assert metrics.page_size == 4

    @pytest.mark.asyncio
    async def test_transport_failure_falls_back_to_simulation(self, failing_client):
        metrics = await make_analyzer(failing_client).analyze_page("https://example.com/")

        assert metrics.simulated is True
        assert metrics.request_count >= 1
        assert len(metrics.resources) == metrics.request_count
        assert metrics.resources[0].type == "document"
        assert metrics.url == "https://example.com/"

    @pytest.mark.asyncio
    async def test_error_status_falls_back_to_simulation(self):
        client = FakeHttpClient(html_response(status=503))
        metrics = await make_analyzer(client).analyze_page("https://www.google.com/")

        assert metrics.simulated is True
        assert 8 <= metrics.request_count <= 23

    @pytest.mark.asyncio
    async def test_malformed_url_makes_no_request(self):
        client = FakeHttpClient(html_response())

        with pytest.raises(ValidationError):
            await make_analyzer(client).analyze_page("not a url")
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_relay_retrieval(self):
        envelope = json.dumps({"contents": SAMPLE_HTML, "status": {"http_code": 200}})
        client = FakeHttpClient(HttpResponse(
            url="https://relay.test/get",
            status=200,
            headers={"Content-Type": "application/json"},
            body=envelope.encode("utf-8"),
        ))
        analyzer = make_analyzer(client, use_relay=True, relay_url="https://relay.test/get")
        metrics = await analyzer.analyze_page("https://example.com/")

        assert client.calls[0]["url"] == "https://relay.test/get?url=https%3A%2F%2Fexample.com%2F"
        assert metrics.simulated is False
        assert metrics.resources[0].size == len(SAMPLE_HTML.encode("utf-8"))
        assert metrics.request_count == 6

    @pytest.mark.asyncio
    async def test_relay_empty_contents(self):
        client = FakeHttpClient(HttpResponse(url="https://relay.test/get", status=200, body=b'{"contents": null}'))
        metrics = await make_analyzer(client, use_relay=True).analyze_page("https://example.com/")

        assert metrics.simulated is False
        assert metrics.request_count == 1
        assert metrics.resources[0].size == 0

    @pytest.mark.asyncio
    async def test_malformed_relay_envelope_falls_back(self):
        client = FakeHttpClient(HttpResponse(url="https://relay.test/get", status=200, body=b"<html>"))
        metrics = await make_analyzer(client, use_relay=True).analyze_page("https://example.com/")

        assert metrics.simulated is True


class TestAnalyzeApi:
    """Test API endpoint analysis."""

    @pytest.mark.asyncio
    async def test_json_endpoint(self):
        body = json.dumps([{"id": i} for i in range(200)]).encode("utf-8")
        client = FakeHttpClient(HttpResponse(
            url="https://api.test/posts",
            status=200,
            headers={"Content-Type": "application/json; charset=utf-8"},
            body=body,
        ))
        metrics = await make_analyzer(client).analyze_api("https://api.test/posts")

        assert metrics.request_count == 1
        assert len(metrics.resources) == 1
        assert metrics.resources[0].type == "json"
        assert metrics.resources[0].size == len(body)
        assert metrics.page_size == round(len(body) / 1024)
        assert metrics.simulated is False
        assert client.calls[0]["headers"]["Accept"] == API_ACCEPT

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client = FakeHttpClient(HttpResponse(url="https://api.test/x", status=404, reason="Not Found"))

        with pytest.raises(AnalysisError) as exc_info:
            await make_analyzer(client).analyze_api("https://api.test/x")
        assert exc_info.value.status == 404
        assert "HTTP 404: Not Found" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, failing_client):
        with pytest.raises(AnalysisError) as exc_info:
            await make_analyzer(failing_client).analyze_api("https://api.test/x")
        assert "Connection refused" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, TransportError)

    @pytest.mark.asyncio
    async def test_malformed_url_makes_no_request(self):
        client = FakeHttpClient(html_response())

        with pytest.raises(ValidationError):
            await make_analyzer(client).analyze_api("not a url")
        assert client.calls == []

    @pytest.mark.parametrize("content_type,expected", [
        ("application/json", "json"),
        ("application/problem+json", "json"),
        ("text/xml", "xml"),
        ("application/xhtml+xml", "xml"),
        ("text/plain", "text"),
        ("image/png", "image"),
        ("application/octet-stream", "data"),
        ("", "data"),
    ])
    def test_resource_type_for(self, content_type, expected):
        assert resource_type_for(content_type) == expected


class TestClassify:
    """Test the analyzer's classification shortcut."""

    @pytest.mark.asyncio
    async def test_classify_small_api_response(self):
        client = FakeHttpClient(HttpResponse(
            url="https://api.test/x",
            status=200,
            headers={"Content-Type": "application/json"},
            body=b"{}",
        ))
        analyzer = make_analyzer(client)
        metrics = await analyzer.analyze_api("https://api.test/x")

        assert analyzer.classify(metrics) == PerformanceLevel.EXCELLENT
