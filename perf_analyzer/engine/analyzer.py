"""
Performance analyzer orchestrating single-request measurements.

Times one request against a page or API endpoint, sizes the payload and
assembles a PerformanceMetrics record.
"""

import random
import time
from typing import List, Optional

from .extractor import ResourceExtractor
from .fetcher import HttpClient
from .models import (
    DEFAULT_THRESHOLDS,
    PerformanceLevel,
    PerformanceMetrics,
    PerformanceThresholds,
    ResourceTiming,
    ResourceType,
)
from .scorer import classify
from .simulator import MetricsSimulator
from ..errors import AnalysisError, TransportError
from ..utils.constants import API_ACCEPT, DEFAULT_RELAY_URL, PAGE_ACCEPT, RELAY_ACCEPT
from ..utils.log import get_logger
from ..utils.urls import build_relay_url, validate_url


def resource_type_for(content_type: str) -> str:
    """Derive a resource type from a Content-Type header value."""
    content_type = (content_type or "").lower()
    for marker in (ResourceType.JSON, ResourceType.XML, ResourceType.TEXT, ResourceType.IMAGE):
        if marker.value in content_type:
            return marker.value
    return ResourceType.DATA.value


def _elapsed_ms(start: float) -> int:
    return round((time.perf_counter() - start) * 1000)


class PerformanceAnalyzer:
    """
    Measures pages and API endpoints.

    Holds no per-run state: every call builds a fresh metrics record, so one
    instance may serve many independent analyses.
    """

    def __init__(
        self,
        http_client=None,
        thresholds: PerformanceThresholds = DEFAULT_THRESHOLDS,
        rng: Optional[random.Random] = None,
        use_relay: bool = False,
        relay_url: str = DEFAULT_RELAY_URL
    ):
        """
        Initialize the analyzer.

        Args:
            http_client: Object with an async ``get(url, headers)`` returning
                an HttpResponse (defaults to the aiohttp client)
            thresholds: Threshold table used by ``classify``
            rng: Random source for estimates and simulated figures
            use_relay: Retrieve pages through the content relay
            relay_url: Base address of the content relay
        """
        self.http_client = http_client or HttpClient()
        self.thresholds = thresholds
        self.rng = rng or random.Random()
        self.use_relay = use_relay
        self.relay_url = relay_url
        self.extractor = ResourceExtractor(self.rng)
        self.simulator = MetricsSimulator(self.rng)
        self.logger = get_logger("analyzer")

    async def analyze_page(self, url: str) -> PerformanceMetrics:
        """
        Analyze a full web page.

        Retrieval failures degrade to simulated metrics instead of raising.

        Args:
            url: Absolute http(s) URL of the page

        Returns:
            PerformanceMetrics whose first resource is the document

        Raises:
            ValidationError: If the URL is malformed
        """
        validate_url(url)
        self.logger.debug(f"Analyzing page {url}")
        start = time.perf_counter()

        try:
            html, size = await self._retrieve_document(url)
        except TransportError as e:
            self.logger.warning(f"Could not retrieve {url} ({e}); using simulated metrics")
            return self._simulated_metrics(url, _elapsed_ms(start))

        load_time = _elapsed_ms(start)
        extracted = self.extractor.extract(html, url)

        document = ResourceTiming(
            name=url,
            size=size,
            duration=load_time,
            type=ResourceType.DOCUMENT.value,
        )
        resources: List[ResourceTiming] = [document] + extracted

        self.logger.debug(
            f"Page {url}: {load_time}ms, {size} bytes, {len(resources)} requests"
        )
        return PerformanceMetrics(
            load_time=load_time,
            page_size=round(size / 1024),
            request_count=1 + len(extracted),
            resources=resources,
            url=url,
            timestamp=time.time(),
        )

    async def analyze_api(self, url: str) -> PerformanceMetrics:
        """
        Analyze a single API endpoint.

        Args:
            url: Absolute http(s) URL of the endpoint

        Returns:
            PerformanceMetrics with exactly one resource

        Raises:
            ValidationError: If the URL is malformed
            AnalysisError: On transport failure or a non-success status
        """
        validate_url(url)
        self.logger.debug(f"Analyzing API {url}")
        start = time.perf_counter()

        try:
            response = await self.http_client.get(url, headers={"Accept": API_ACCEPT})
            response.raise_for_status()
        except TransportError as e:
            self.logger.debug(f"API analysis of {url} failed: {e}")
            raise AnalysisError(f"Failed to analyze API: {e}", status=e.status) from e

        load_time = _elapsed_ms(start)
        size = len(response.body)

        resource = ResourceTiming(
            name=url,
            size=size,
            duration=load_time,
            type=resource_type_for(response.content_type),
        )
        return PerformanceMetrics(
            load_time=load_time,
            page_size=round(size / 1024),
            request_count=1,
            resources=[resource],
            url=url,
            timestamp=time.time(),
        )

    def classify(self, metrics: PerformanceMetrics) -> PerformanceLevel:
        """Classify metrics against this analyzer's thresholds."""
        return classify(metrics, self.thresholds)

    async def _retrieve_document(self, url: str):
        """
        Fetch the page body, directly or through the content relay.

        Returns:
            Tuple of (html text, payload size in bytes)

        Raises:
            TransportError: On any retrieval failure
        """
        if not self.use_relay:
            response = await self.http_client.get(url, headers={"Accept": PAGE_ACCEPT})
            response.raise_for_status()
            return response.text(), len(response.body)

        response = await self.http_client.get(
            build_relay_url(self.relay_url, url),
            headers={"Accept": RELAY_ACCEPT}
        )
        if not response.ok:
            raise TransportError(
                f"Relay failed: HTTP {response.status}: {response.reason}", response.status
            )

        envelope = response.json()
        if not isinstance(envelope, dict):
            raise TransportError("Relay returned an unexpected envelope", response.status)
        html = envelope.get("contents") or ""
        if not isinstance(html, str):
            raise TransportError("Relay returned non-text contents", response.status)
        return html, len(html.encode("utf-8"))

    def _simulated_metrics(self, url: str, elapsed: int) -> PerformanceMetrics:
        sample = self.simulator.simulate(url, elapsed)
        return PerformanceMetrics(
            load_time=sample.load_time,
            page_size=sample.page_size,
            request_count=sample.request_count,
            resources=sample.resources,
            url=url,
            timestamp=time.time(),
            simulated=True,
        )
