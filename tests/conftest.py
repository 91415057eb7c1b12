"""
Shared fixtures: SpaceX API responses and a fake API client.
"""
import pytest
import structlog
from unittest.mock import Mock, AsyncMock

from sxl.client.endpoints import Endpoints
from sxl.client.errors import FetchError

TEST_BASE_URL = "https://api.test/v4"


@pytest.fixture(autouse=True)
def reset_structlog():
    """Leave structlog unconfigured between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def endpoints():
    return Endpoints(TEST_BASE_URL)


@pytest.fixture
def launch_json():
    return {
        "flight_number": 1,
        "name": "Test",
        "date_unix": 1700000000,
        "payloads": "p1",
        "launchpad": "lp1",
        "success": True,
    }


@pytest.fixture
def next_launch_json():
    return {
        "flight_number": 2,
        "name": "Upcoming Test",
        "details": None,
        "date_unix": 1800000000,
        "date_precision": "hour",
        "payloads": ["p2"],
        "launchpad": "lp1",
        "success": None,
    }


@pytest.fixture
def payload_json():
    return {"name": "Sat", "type": "Comm", "customers": ["ACME"], "manufacturers": ["ACME"]}


@pytest.fixture
def launchpad_json():
    return {"full_name": "Pad A", "region": "FL", "launch_successes": 9, "launch_attempts": 10}


@pytest.fixture
def api_responses(launch_json, next_launch_json, payload_json, launchpad_json):
    """URL to JSON body, or to a FetchError to raise for that URL."""
    return {
        f"{TEST_BASE_URL}/launches/latest": launch_json,
        f"{TEST_BASE_URL}/launches/next": next_launch_json,
        f"{TEST_BASE_URL}/payloads/p1": payload_json,
        f"{TEST_BASE_URL}/payloads/p2": {"name": "Cargo", "type": "Dragon 2.0"},
        f"{TEST_BASE_URL}/launchpads/lp1": launchpad_json,
    }


@pytest.fixture
def mock_client(api_responses):
    """API client whose fetch_json answers from api_responses."""

    async def fetch_json(url, resource):
        response = api_responses.get(url)
        if response is None:
            raise FetchError(f"HTTP 404 for {url}", resource, url=url, status=404, reason="Not Found")
        if isinstance(response, FetchError):
            raise response
        return response

    client = Mock()
    client.fetch_json = AsyncMock(side_effect=fetch_json)
    return client
