"""Shared fixtures for analyzer tests."""

import random
from typing import Dict, List, Optional

import pytest

from perf_analyzer.engine.fetcher import HttpResponse
from perf_analyzer.errors import TransportError


class FakeHttpClient:
    """Stands in for HttpClient; records every request it receives."""

    def __init__(self, response: Optional[HttpResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Dict] = []

    async def get(self, url, headers=None):
        self.calls.append({"url": url, "headers": headers or {}})
        if self.error is not None:
            raise self.error
        return self.response


SAMPLE_HTML = """
<html>
  <head>
    <link rel="stylesheet" href="/css/main.css">
    <link rel="icon" href="/favicon.ico">
    <script src="https://cdn.example.net/lib.js"></script>
    <link href="print.css" media="print">
  </head>
  <body>
    <img src="images/logo.png" alt="logo">
    <script>console.log("inline");</script>
    <img src="" alt="empty">
    <script src="/js/app.js" defer></script>
  </body>
</html>
"""


def html_response(html: str = SAMPLE_HTML, status: int = 200, url: str = "https://example.com/") -> HttpResponse:
    return HttpResponse(
        url=url,
        status=status,
        reason="OK" if status == 200 else "Error",
        headers={"Content-Type": "text/html; charset=utf-8"},
        body=html.encode("utf-8"),
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def failing_client():
    return FakeHttpClient(error=TransportError("Connection refused"))
