"""
Resource extractor for parsing HTML and estimating sub-resource costs.

Uses BeautifulSoup for HTML parsing to find scripts, stylesheets and images.
Sub-resources are never fetched; their sizes and load times are estimates
drawn from type-specific ranges.
"""

import random
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .models import ResourceTiming, ResourceType
from ..utils.log import get_logger
from ..utils.urls import resolve_url


KB = 1024

# Estimated (size bytes, duration ms) ranges per resource type
ESTIMATE_RANGES: Dict[str, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    ResourceType.SCRIPT.value: ((20 * KB, 120 * KB), (50, 350)),
    ResourceType.STYLESHEET.value: ((10 * KB, 60 * KB), (30, 230)),
    ResourceType.IMAGE.value: ((50 * KB, 250 * KB), (100, 500)),
}


class ResourceExtractor:
    """
    Extracts sub-resource references from HTML content.

    Emits one estimated ResourceTiming per script, stylesheet and image
    reference, in document order.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the resource extractor.

        Args:
            rng: Random source for size and duration estimates
        """
        self.rng = rng or random.Random()
        self.logger = get_logger("extractor")

    def extract(self, html: str, base_url: str) -> List[ResourceTiming]:
        """
        Extract estimated resources from HTML content.

        Args:
            html: HTML content to parse
            base_url: URL of the page (for resolving relative URLs)

        Returns:
            List of ResourceTiming in document order
        """
        try:
            soup = BeautifulSoup(html, 'lxml')
        except Exception:
            # Fallback to html.parser if lxml fails
            soup = BeautifulSoup(html, 'html.parser')

        resources = []
        for element in soup.find_all(['script', 'link', 'img']):
            match = self._match(element)
            if match is None:
                continue
            resource_type, reference = match
            resources.append(self._estimate(resolve_url(reference, base_url), resource_type))

        self.logger.debug(f"Extracted {len(resources)} resources from {base_url}")
        return resources

    def _match(self, element: Tag) -> Optional[Tuple[str, str]]:
        """Return (type, reference) when the element references a resource."""
        if element.name == 'script':
            src = (element.get('src') or '').strip()
            return (ResourceType.SCRIPT.value, src) if src else None

        if element.name == 'img':
            src = (element.get('src') or '').strip()
            return (ResourceType.IMAGE.value, src) if src else None

        href = (element.get('href') or '').strip()
        if not href:
            return None
        if self._is_stylesheet(element) or href.lower().endswith('.css'):
            return (ResourceType.STYLESHEET.value, href)
        return None

    @staticmethod
    def _is_stylesheet(link: Tag) -> bool:
        # rel is parsed as a list of space-separated values
        rel_value = link.get('rel', [])
        if isinstance(rel_value, str):
            rel_value = rel_value.split()
        return 'stylesheet' in [v.lower() for v in rel_value]

    def _estimate(self, name: str, resource_type: str) -> ResourceTiming:
        (min_size, max_size), (min_ms, max_ms) = ESTIMATE_RANGES[resource_type]
        return ResourceTiming(
            name=name,
            size=self.rng.randint(min_size, max_size),
            duration=self.rng.randint(min_ms, max_ms),
            type=resource_type,
        )
