"""
HTTP client for performance measurements.

Uses aiohttp to issue single GET requests and hand back the complete body.
"""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientTimeout, ClientError

from ..errors import TransportError
from ..utils.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..utils.log import get_logger


@dataclass
class HttpResponse:
    """A fully read HTTP response."""
    url: str
    status: int
    reason: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def content_type(self) -> str:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value
        return ""

    @property
    def charset(self) -> str:
        for part in self.content_type.split(";")[1:]:
            name, _, value = part.strip().partition("=")
            if name.lower() == "charset" and value:
                return value.strip('"\'')
        return "utf-8"

    def text(self) -> str:
        """Decode the body using the declared charset."""
        try:
            return self.body.decode(self.charset, errors="replace")
        except LookupError:
            return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """
        Decode the body as JSON.

        Raises:
            TransportError: If the body is not valid JSON
        """
        try:
            return json.loads(self.text())
        except json.JSONDecodeError as e:
            raise TransportError(f"Malformed JSON from {self.url}: {e}", self.status) from e

    def raise_for_status(self) -> None:
        """
        Raise TransportError for a non-success status.
        """
        if not self.ok:
            raise TransportError(f"HTTP {self.status}: {self.reason}".rstrip(": "), self.status)


class HttpClient:
    """
    Performs single HTTP GET requests.

    A new session is opened per request; one analysis issues one request.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize the HTTP client.

        Args:
            timeout: Total request timeout in seconds
            user_agent: User agent string for requests
        """
        self.timeout = ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self.logger = get_logger("fetcher")

    async def get(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None
    ) -> HttpResponse:
        """
        Fetch a URL and read the complete body.

        Args:
            url: Absolute URL to fetch
            headers: Extra request headers

        Returns:
            HttpResponse with status, headers and raw body

        Raises:
            TransportError: On connection failure or timeout
        """
        request_headers = {"User-Agent": self.user_agent}
        if headers:
            request_headers.update(headers)

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(
                    url,
                    headers=request_headers,
                    allow_redirects=True
                ) as response:
                    body = await response.read()
                    self.logger.debug(f"GET {url} -> {response.status} ({len(body)} bytes)")
                    return HttpResponse(
                        url=str(response.url),
                        status=response.status,
                        reason=response.reason or "",
                        headers=dict(response.headers),
                        body=body,
                    )
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {url} timed out after {self.timeout.total}s") from e
        except ClientError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
