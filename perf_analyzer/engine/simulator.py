"""
Simulated metrics for pages that cannot be retrieved.

When a page cannot be fetched the analyzer still reports a plausible,
clearly approximate picture of its performance. Figures are drawn from
coarse per-domain profiles; nothing here is a measurement.
"""

import random
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple
from urllib.parse import urlparse

from .models import ResourceTiming, ResourceType
from ..utils.log import get_logger
from ..utils.urls import get_host


KB = 1024


@dataclass(frozen=True)
class DomainProfile:
    """Random ranges for one class of site."""
    name: str
    markers: Tuple[str, ...]
    load_time: Tuple[float, float]   # ms added to the elapsed time
    page_size: Tuple[float, float]   # KB
    request_count: Tuple[float, float]


# Checked in order; the first profile with a marker in the host wins
DOMAIN_PROFILES = (
    DomainProfile("fast", ("google", "github"), (200, 700), (100, 400), (8, 23)),
    DomainProfile("heavy", ("wikipedia", "stackoverflow"), (600, 1800), (400, 1200), (15, 40)),
)

GENERIC_PROFILE = DomainProfile("generic", (), (500, 2000), (300, 1300), (12, 42))


# (type, share of total requests, average size in KB); the last entry takes
# whatever is left so the synthetic count always matches
RESOURCE_MIX = (
    (ResourceType.SCRIPT.value, 0.25, 45),
    (ResourceType.STYLESHEET.value, 0.15, 25),
    (ResourceType.IMAGE.value, 0.35, 120),
    (ResourceType.XHR.value, 0.10, 15),
    (ResourceType.FONT.value, 0.08, 80),
    (ResourceType.DOCUMENT.value, 0.07, 30),
)

# Synthetic sizes fall within +/-30% of the per-type average
SIZE_VARIANCE = 0.3

SYNTHETIC_DURATION = (50, 250)


class SimulatedSample(NamedTuple):
    load_time: int
    page_size: int
    request_count: int
    resources: List[ResourceTiming]


def select_profile(host: str) -> DomainProfile:
    """Pick the domain profile for a host name."""
    for profile in DOMAIN_PROFILES:
        if any(marker in host for marker in profile.markers):
            return profile
    return GENERIC_PROFILE


class MetricsSimulator:
    """
    Produces randomized metrics for a URL.

    The random source is injectable so results are reproducible under test.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.logger = get_logger("simulator")

    def simulate(self, url: str, base_elapsed: float = 0) -> SimulatedSample:
        """
        Generate a metrics sample for a URL.

        Args:
            url: Target URL (must have a host)
            base_elapsed: Milliseconds already spent before falling back

        Returns:
            SimulatedSample whose resource list length equals request_count
        """
        host = get_host(url)
        profile = select_profile(host)

        load_time = round(base_elapsed + self.rng.uniform(*profile.load_time))
        page_size = round(self.rng.uniform(*profile.page_size))
        request_count = max(1, round(self.rng.uniform(*profile.request_count)))

        document = ResourceTiming(
            name=url,
            size=self._synthetic_size(30),
            duration=load_time,
            type=ResourceType.DOCUMENT.value,
        )
        resources = [document] + self.generate_resources(url, request_count)

        self.logger.debug(
            f"Simulated {profile.name} profile for {host}: "
            f"{load_time}ms, {page_size}KB, {request_count} requests"
        )
        return SimulatedSample(load_time, page_size, request_count, resources)

    def generate_resources(self, url: str, request_count: int) -> List[ResourceTiming]:
        """
        Distribute ``request_count - 1`` synthetic resources over the type mix.
        """
        parsed = urlparse(url)
        origin = f"{parsed.scheme or 'https'}://{parsed.netloc}"

        resources = []
        remaining = request_count - 1
        last = len(RESOURCE_MIX) - 1

        for index, (resource_type, ratio, avg_size) in enumerate(RESOURCE_MIX):
            count = remaining if index == last else round(request_count * ratio)
            count = min(count, remaining)

            for i in range(count):
                resources.append(ResourceTiming(
                    name=f"{origin}/{resource_type}/{i + 1}",
                    size=self._synthetic_size(avg_size),
                    duration=self.rng.randint(*SYNTHETIC_DURATION),
                    type=resource_type,
                ))
            remaining -= count

        return resources

    def _synthetic_size(self, avg_kb: float) -> int:
        spread = avg_kb * SIZE_VARIANCE
        size_kb = max(1, round(avg_kb + self.rng.uniform(-spread, spread)))
        return size_kb * KB
