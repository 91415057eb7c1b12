"""
Enrichment of a launch with its payload and launchpad details.
"""
import asyncio
from typing import Optional

from ..client.api_client import SpaceXApiClient
from ..client.endpoints import Endpoints
from ..logging_config import get_logger
from ..models.schemas import LaunchRecord, ResourceKind, UNKNOWN_SUMMARY
from .date_formatter import format_launch_date
from .extractors import extract_launch, extract_payload, extract_launchpad

logger = get_logger(__name__, component="enrichment")


class LaunchEnricher:
    """
    Fetches a launch and merges in the details of its payload and launchpad.

    The payload and launchpad lookups only depend on the launch itself, so they
    can be awaited one after the other or gathered concurrently. Either way the
    returned record is the same.
    """

    def __init__(self,
                 client: SpaceXApiClient,
                 endpoints: Optional[Endpoints] = None,
                 parallel_lookups: bool = False):
        """
        Initialize the enricher.

        Args:
            client: Client with an open session
            endpoints: Builder for the resource URLs
            parallel_lookups: Gather the payload and launchpad lookups concurrently
        """
        self.client = client
        self.endpoints = endpoints or Endpoints()
        self.parallel_lookups = parallel_lookups

    async def enrich(self, resource_url: str) -> LaunchRecord:
        """
        Build a fully populated launch record.

        Args:
            resource_url: URL of a launch resource

        Returns:
            LaunchRecord with display date, payload and launchpad summaries set

        Raises:
            FetchError: If any of the three fetches fails
        """
        launch = extract_launch(await self.client.fetch_json(resource_url, ResourceKind.LAUNCH))
        launch.display_date = format_launch_date(launch.launch_epoch)

        if self.parallel_lookups:
            results = await asyncio.gather(
                self.describe_payload(launch),
                self.describe_launchpad(launch),
                return_exceptions=True,
            )
            # payload failure is reported first, as in a sequential run
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            payload_summary, launchpad_summary = results
        else:
            payload_summary = await self.describe_payload(launch)
            launchpad_summary = await self.describe_launchpad(launch)

        launch.payload_summary = payload_summary or UNKNOWN_SUMMARY
        launch.launchpad_summary = launchpad_summary or UNKNOWN_SUMMARY

        logger.info(
            "Launch enriched",
            flight_number=launch.flight_number,
            flight_name=launch.flight_name,
        )
        return launch

    async def describe_payload(self, launch: LaunchRecord) -> Optional[str]:
        """Fetch the launch's payload and describe it in one sentence."""
        if not launch.payload_ref:
            logger.warning("Launch has no payload reference", flight_number=launch.flight_number)
            return None

        url = self.endpoints.payload(launch.payload_ref)
        payload = extract_payload(await self.client.fetch_json(url, ResourceKind.PAYLOAD))
        return payload.sentence()

    async def describe_launchpad(self, launch: LaunchRecord) -> Optional[str]:
        """Fetch the launch's launchpad and describe it in one sentence."""
        if not launch.launchpad_ref:
            logger.warning("Launch has no launchpad reference", flight_number=launch.flight_number)
            return None

        url = self.endpoints.launchpad(launch.launchpad_ref)
        launchpad = extract_launchpad(await self.client.fetch_json(url, ResourceKind.LAUNCHPAD))
        return launchpad.sentence()
