"""
Map raw SpaceX API JSON into launch, payload and launchpad records.

Missing or null fields become None on the record; the sentences built from
the records substitute an "UNKNOWN <field>" placeholder for them.
"""
from typing import Any, Dict, List, Optional

from ..models.schemas import LaunchRecord, PayloadSummary, LaunchpadSummary, ResourceKind
from ..client.errors import ResponseParseError


def _require_object(data: Any, resource: ResourceKind) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ResponseParseError(
            f"Expected a JSON object for {resource.value}, got {type(data).__name__}",
            resource, reason="Unexpected JSON",
        )
    return data


def _text(value: Any) -> Optional[str]:
    """Return a stripped string, or None for null and empty values."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _text_list(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        value = [value]
    items = [_text(item) for item in value]
    items = [item for item in items if item]
    return items or None


def _integer(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def extract_launch(data: Any) -> LaunchRecord:
    """Build a LaunchRecord from a /launches/latest or /launches/next response."""
    launch = _require_object(data, ResourceKind.LAUNCH)
    success = launch.get('success')

    # flight_number and name are passed through unchecked
    return LaunchRecord(
        flight_number=_integer(launch.get('flight_number')),
        flight_name=_text(launch.get('name')),
        details=_text(launch.get('details')),
        launch_epoch=_integer(launch.get('date_unix')),
        payload_ref=launch.get('payloads'),
        launchpad_ref=launch.get('launchpad'),
        succeeded=success if isinstance(success, bool) else None,
        date_precision=_text(launch.get('date_precision')),
    )


def extract_payload(data: Any) -> PayloadSummary:
    """Build a PayloadSummary from a /payloads/:id response."""
    payload = _require_object(data, ResourceKind.PAYLOAD)
    return PayloadSummary(
        name=_text(payload.get('name')),
        type=_text(payload.get('type')),
        customers=_text_list(payload.get('customers')),
        manufacturers=_text_list(payload.get('manufacturers')),
    )


def extract_launchpad(data: Any) -> LaunchpadSummary:
    """Build a LaunchpadSummary from a /launchpads/:id response."""
    launchpad = _require_object(data, ResourceKind.LAUNCHPAD)
    return LaunchpadSummary(
        full_name=_text(launchpad.get('full_name')),
        region=_text(launchpad.get('region')),
        launch_successes=_integer(launchpad.get('launch_successes')),
        launch_attempts=_integer(launchpad.get('launch_attempts')),
    )
