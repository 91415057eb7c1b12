"""
Text rendering of enriched launch records.
"""
from rich.text import Text

from ..models.schemas import LaunchKind, LaunchRecord, UNKNOWN, UNKNOWN_SUMMARY

BANNER_TITLE = "SpaceX  -  Rocket  Launch  Information"

LABEL_STYLES = {
    LaunchKind.LATEST.label: "bold green",
    LaunchKind.NEXT.label: "bold cyan",
}


def render_banner() -> Text:
    """Program title over a rule of the same width."""
    banner = Text(BANNER_TITLE, style="bold")
    banner.append("\n")
    banner.append("¯" * len(BANNER_TITLE), style="bold")
    return banner


def _flight_successful(record: LaunchRecord) -> str:
    if record.succeeded is None:
        return "Awaiting launch"
    return "true" if record.succeeded else "false"


def render_launch(record: LaunchRecord, label: str) -> Text:
    """
    Format one launch as a block of text.

    Args:
        record: Enriched launch record
        label: "Latest" or "Next Scheduled"

    Returns:
        rich Text with the label styled; ``.plain`` gives the uncoloured block
    """
    is_next = label == LaunchKind.NEXT.label

    launch_date = record.display_date or UNKNOWN
    if is_next:
        precision = (record.date_precision or UNKNOWN).upper()
        launch_date = f"{launch_date} [Precision: {precision}]"

    flight_number = record.flight_number if record.flight_number is not None else UNKNOWN

    block = Text()
    block.append(label, style=LABEL_STYLES.get(label, "bold"))
    block.append(" SpaceX Launch 🚀\n\n")
    block.append(
        f"Flight Number     : {flight_number}\n"
        f"Flight Name       : {record.flight_name or UNKNOWN}\n"
        f"Launchpad         : {record.launchpad_summary or UNKNOWN_SUMMARY}\n"
        f"Launch Date       : {launch_date}\n"
        f"Flight Successful : {_flight_successful(record)}\n"
        "\n"
        "Payload Details:\n"
        f"{record.payload_summary or UNKNOWN_SUMMARY}\n"
        "\n"
        "Flight Details:\n"
        f"{record.details or 'None available'}\n"
    )
    return block
