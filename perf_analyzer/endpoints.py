"""
Catalog of public sample API endpoints for quick performance tests.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ApiEndpoint:
    """A public API endpoint that can be analyzed."""
    id: str
    name: str
    url: str
    description: str
    category: str
    method: str = "GET"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


SAMPLE_ENDPOINTS = (
    ApiEndpoint(
        id="jsonplaceholder-posts",
        name="JSONPlaceholder Posts",
        url="https://jsonplaceholder.typicode.com/posts",
        description="Fake REST API for testing and prototyping - Posts collection",
        category="Testing",
    ),
    ApiEndpoint(
        id="jsonplaceholder-users",
        name="JSONPlaceholder Users",
        url="https://jsonplaceholder.typicode.com/users",
        description="Fake REST API for testing and prototyping - Users collection",
        category="Testing",
    ),
    ApiEndpoint(
        id="jsonplaceholder-single-post",
        name="JSONPlaceholder Single Post",
        url="https://jsonplaceholder.typicode.com/posts/1",
        description="Fetch a single post by ID for performance testing",
        category="Testing",
    ),
    ApiEndpoint(
        id="rest-countries",
        name="REST Countries",
        url="https://restcountries.com/v3.1/all",
        description="Get comprehensive information about all countries worldwide",
        category="Geography",
    ),
    ApiEndpoint(
        id="rest-countries-name",
        name="REST Countries by Name",
        url="https://restcountries.com/v3.1/name/united",
        description='Search countries by name - returns countries containing "united"',
        category="Geography",
    ),
    ApiEndpoint(
        id="cat-fact",
        name="Cat Facts API",
        url="https://catfact.ninja/fact",
        description="Get random interesting facts about cats",
        category="Entertainment",
    ),
    ApiEndpoint(
        id="dog-ceo",
        name="Dog CEO Random Image",
        url="https://dog.ceo/api/breeds/image/random",
        description="Get random dog images from various breeds",
        category="Entertainment",
    ),
    ApiEndpoint(
        id="dog-breeds",
        name="Dog Breeds List",
        url="https://dog.ceo/api/breeds/list/all",
        description="Get a complete list of all available dog breeds",
        category="Entertainment",
    ),
    ApiEndpoint(
        id="openweather-sample",
        name="OpenWeatherMap Sample",
        url="https://samples.openweathermap.org/data/2.5/weather?q=London&appid=b6907d289e10d714a6e88b30761fae22",
        description="Sample weather data for London (demo API key)",
        category="Weather",
    ),
    ApiEndpoint(
        id="httpbin-get",
        name="HTTPBin GET Test",
        url="https://httpbin.org/get",
        description="HTTP testing service - returns request data in JSON format",
        category="Testing",
    ),
    ApiEndpoint(
        id="httpbin-delay",
        name="HTTPBin Delay Test",
        url="https://httpbin.org/delay/2",
        description="HTTP testing service with 2-second delay for performance testing",
        category="Testing",
    ),
    ApiEndpoint(
        id="reqres-users",
        name="ReqRes Users",
        url="https://reqres.in/api/users",
        description="Test REST API with user data for development testing",
        category="Testing",
    ),
)

ALL_CATEGORIES = "All"

API_CATEGORIES = (ALL_CATEGORIES, "Testing", "Geography", "Entertainment", "Weather")


def filter_endpoints(category: Optional[str] = None) -> List[ApiEndpoint]:
    """
    Return the sample endpoints in a category.

    Args:
        category: Category name (case-insensitive); None or "All" for every endpoint

    Returns:
        Matching endpoints in catalog order
    """
    if not category or category.lower() == ALL_CATEGORIES.lower():
        return list(SAMPLE_ENDPOINTS)
    return [e for e in SAMPLE_ENDPOINTS if e.category.lower() == category.lower()]


def get_endpoint(endpoint_id: str) -> Optional[ApiEndpoint]:
    """Look up a sample endpoint by id."""
    for endpoint in SAMPLE_ENDPOINTS:
        if endpoint.id == endpoint_id:
            return endpoint
    return None
