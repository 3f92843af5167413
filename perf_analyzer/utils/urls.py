"""
URL utilities for the performance analyzer.

Provides URL validation, host extraction and reference resolution.
"""

from urllib.parse import urlparse, urljoin, urlencode

from ..errors import ValidationError


# Schemes the HTTP client can reach
SUPPORTED_SCHEMES = ('http', 'https')


def validate_url(url: str) -> str:
    """
    Check that a URL is a well-formed absolute http(s) URL.

    The URL is returned unchanged; the engine never canonicalizes it.

    Args:
        url: URL string to validate

    Returns:
        The same URL string

    Raises:
        ValidationError: If URL is not absolute or has no host
    """
    if not isinstance(url, str) or not url.strip():
        raise ValidationError("URL is required")

    try:
        parsed = urlparse(url)
        # Accessing port validates the netloc (e.g. "host:abc")
        parsed.port
    except ValueError as e:
        raise ValidationError(f"Invalid URL: {url} ({e})") from e

    if parsed.scheme.lower() not in SUPPORTED_SCHEMES or not parsed.hostname:
        raise ValidationError(f"Invalid URL: {url}")

    if any(ch.isspace() for ch in url.strip()):
        raise ValidationError(f"Invalid URL: {url}")

    return url


def ensure_scheme(url: str) -> str:
    """
    Prepend https:// when the user omitted the protocol.

    Used by the outer surfaces only, before handing the URL to the engine.
    """
    url = url.strip()
    if url and not url.startswith(('http://', 'https://')):
        url = 'https://' + url
    return url


def get_host(url: str) -> str:
    """
    Extract the lower-cased host name from a URL.

    Args:
        url: URL to extract host from

    Returns:
        Host string (e.g. 'example.com')
    """
    return (urlparse(url).hostname or '').lower()


def resolve_url(reference: str, base_url: str) -> str:
    """
    Resolve a possibly-relative reference against a base URL.

    Absolute references pass through unchanged; references that cannot be
    resolved fall back to the raw text.
    """
    try:
        return urljoin(base_url, reference)
    except ValueError:
        return reference


def build_relay_url(relay_url: str, target_url: str) -> str:
    """Wrap a target URL into a content-relay request URL."""
    separator = '&' if '?' in relay_url else '?'
    return f"{relay_url}{separator}{urlencode({'url': target_url})}"
