"""
HTTP client for the SpaceX REST API using aiohttp.
"""

import asyncio
import json
from typing import Any, Optional

import aiohttp

from ..logging_config import get_logger
from ..models.schemas import ResourceKind
from .errors import FetchError, ResponseParseError

logger = get_logger(__name__, component="api_client")


class SpaceXApiClient:
    """
    Fetches JSON resources from the SpaceX API.
    One session is shared by every request made during a run.
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize the client.

        Args:
            timeout: Total timeout per request in seconds, None for the aiohttp default
        """
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close_session()

    async def start_session(self):
        """Start the aiohttp session."""
        if self.timeout:
            self.session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
        else:
            self.session = aiohttp.ClientSession()
        logger.debug("API client session started", timeout=self.timeout)

    async def close_session(self):
        """Close the aiohttp session."""
        if self.session:
            await self.session.close()
            self.session = None
            logger.debug("API client session closed")

    async def fetch_json(self, url: str, resource: ResourceKind) -> Any:
        """
        GET a URL and return the decoded JSON body.

        Args:
            url: Resource URL
            resource: Kind of resource being fetched, carried on any error raised

        Returns:
            Decoded JSON value

        Raises:
            FetchError: On a non-success status or a network failure
            ResponseParseError: If the body is not valid JSON
        """
        if not self.session:
            raise FetchError(
                "Session not initialized. Use async context manager or call start_session()",
                resource, url=url,
            )

        logger.info("Fetching resource", resource=resource.value, url=url)

        try:
            async with self.session.get(url) as response:
                if not 200 <= response.status < 300:
                    logger.info(
                        "Unsuccessful server response",
                        resource=resource.value, url=url,
                        status=response.status, reason=response.reason,
                    )
                    raise FetchError(
                        f"HTTP {response.status} for {url}",
                        resource, url=url, status=response.status, reason=response.reason,
                    )

                body = await response.text()

        except aiohttp.ClientError as e:
            logger.info("Network error", resource=resource.value, url=url, error=str(e))
            raise FetchError(f"Network error fetching {url}: {e}", resource, url=url, reason=str(e)) from e

        except asyncio.TimeoutError as e:
            logger.info("Request timed out", resource=resource.value, url=url)
            raise FetchError(f"Timed out fetching {url}", resource, url=url, reason="Timeout") from e

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            logger.info("Response is not valid JSON", resource=resource.value, url=url, error=str(e))
            raise ResponseParseError(
                f"Invalid JSON from {url}: {e}", resource, url=url, reason="Invalid JSON",
            ) from e
