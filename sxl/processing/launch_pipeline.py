"""
Runs the latest and next launch reports in order.
"""
from typing import Callable, List, Optional

from rich.text import Text

from ..client.api_client import SpaceXApiClient
from ..client.endpoints import Endpoints
from ..config import SxlConfig
from ..logging_config import get_logger, TimedOperation
from ..rendering.renderer import render_launch
from .enrichment import LaunchEnricher

logger = get_logger(__name__, component="launch_pipeline")


async def _report(config: SxlConfig, client: SpaceXApiClient, sink: Callable[[Text], None]) -> List[Text]:
    endpoints = Endpoints(config.api_base_url)
    enricher = LaunchEnricher(client, endpoints, parallel_lookups=config.parallel_lookups)
    blocks = []

    for kind in config.launch_kinds:
        # failures are reported once, by the caller
        with TimedOperation(logger, "launch enrichment", failure_level="info", launch=kind.value):
            record = await enricher.enrich(endpoints.launch(kind))
        block = render_launch(record, kind.label)
        # each block is handed over before the next launch is fetched
        sink(block)
        blocks.append(block)

    return blocks


async def run_launch_report(config: SxlConfig,
                            sink: Callable[[Text], None],
                            client: Optional[SpaceXApiClient] = None) -> List[Text]:
    """
    Fetch, enrich and render each configured launch.

    Args:
        config: Run configuration
        sink: Called with each rendered block as soon as it is ready
        client: Client with an open session; one is created for the run if None

    Returns:
        The rendered blocks, in output order

    Raises:
        FetchError: If any fetch fails; blocks already passed to the sink stay printed
    """
    if client is not None:
        return await _report(config, client, sink)

    async with SpaceXApiClient(timeout=config.request_timeout) as api:
        return await _report(config, api, sink)
