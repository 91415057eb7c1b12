"""
Unit tests for launch enrichment.
"""
import pytest
from structlog.testing import capture_logs

from sxl.client.errors import FetchError
from sxl.models.schemas import ResourceKind
from sxl.processing.enrichment import LaunchEnricher

TEST_BASE_URL = "https://api.test/v4"

LATEST_URL = f"{TEST_BASE_URL}/launches/latest"
NEXT_URL = f"{TEST_BASE_URL}/launches/next"


def requested_urls(mock_client):
    return [call.args[0] for call in mock_client.fetch_json.call_args_list]


class TestLaunchEnricher:
    """Test cases for LaunchEnricher."""

    @pytest.fixture(params=[False, True], ids=["sequential", "parallel"])
    def enricher(self, request, mock_client, endpoints):
        return LaunchEnricher(mock_client, endpoints, parallel_lookups=request.param)

    @pytest.mark.asyncio
    async def test_enrich_latest(self, enricher, mock_client):
        record = await enricher.enrich(LATEST_URL)

        assert record.flight_number == 1
        assert record.display_date == "Tue, 14 Nov 2023 22:13:20 GMT"
        assert record.payload_summary == (
            "Payload is: Sat (Comm) for customer: ACME. Payload manufactured by: ACME."
        )
        assert record.launchpad_summary == "Pad A (FL). Launched 9 of 10 attempts."
        assert sorted(requested_urls(mock_client)) == sorted([
            LATEST_URL,
            f"{TEST_BASE_URL}/payloads/p1",
            f"{TEST_BASE_URL}/launchpads/lp1",
        ])

    @pytest.mark.asyncio
    async def test_launch_fetched_before_lookups(self, enricher, mock_client):
        await enricher.enrich(LATEST_URL)

        first_call = mock_client.fetch_json.call_args_list[0]
        assert first_call.args == (LATEST_URL, ResourceKind.LAUNCH)

    @pytest.mark.asyncio
    async def test_enrich_next_with_partial_payload(self, enricher):
        record = await enricher.enrich(NEXT_URL)

        assert record.date_precision == "hour"
        assert record.succeeded is None
        assert "UNKNOWN customer" in record.payload_summary
        assert "UNKNOWN manufacturer" in record.payload_summary

    @pytest.mark.asyncio
    async def test_launch_failure_stops_dependent_requests(self, enricher, mock_client, api_responses):
        api_responses[LATEST_URL] = FetchError(
            "HTTP 500", ResourceKind.LAUNCH, url=LATEST_URL, status=500, reason="Internal Server Error",
        )

        with pytest.raises(FetchError) as exc_info:
            await enricher.enrich(LATEST_URL)

        assert exc_info.value.resource == ResourceKind.LAUNCH
        assert mock_client.fetch_json.call_count == 1

    @pytest.mark.asyncio
    async def test_payload_failure(self, enricher, api_responses):
        del api_responses[f"{TEST_BASE_URL}/payloads/p1"]

        with pytest.raises(FetchError) as exc_info:
            await enricher.enrich(LATEST_URL)

        assert exc_info.value.resource == ResourceKind.PAYLOAD

    @pytest.mark.asyncio
    async def test_launchpad_failure(self, enricher, api_responses):
        del api_responses[f"{TEST_BASE_URL}/launchpads/lp1"]

        with pytest.raises(FetchError) as exc_info:
            await enricher.enrich(LATEST_URL)

        assert exc_info.value.resource == ResourceKind.LAUNCHPAD

    @pytest.mark.asyncio
    async def test_payload_reported_when_both_lookups_fail(self, enricher, api_responses):
        del api_responses[f"{TEST_BASE_URL}/payloads/p1"]
        del api_responses[f"{TEST_BASE_URL}/launchpads/lp1"]

        with pytest.raises(FetchError) as exc_info:
            await enricher.enrich(LATEST_URL)

        assert exc_info.value.resource == ResourceKind.PAYLOAD

    @pytest.mark.asyncio
    async def test_missing_references_skip_lookups(self, enricher, mock_client, launch_json):
        del launch_json["payloads"]
        del launch_json["launchpad"]
        launch_json["date_unix"] = 0

        with capture_logs() as logs:
            record = await enricher.enrich(LATEST_URL)

        assert record.payload_summary == "Unknown"
        assert record.launchpad_summary == "Unknown"
        assert record.display_date == "UNKNOWN"
        assert mock_client.fetch_json.call_count == 1
        assert len([entry for entry in logs if entry["log_level"] == "warning"]) == 3
