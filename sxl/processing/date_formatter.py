"""
Format launch times for display.
"""
from email.utils import formatdate
from typing import Optional

from ..logging_config import get_logger
from ..models.schemas import UNKNOWN

logger = get_logger(__name__, component="date_formatter")


def format_launch_date(epoch_seconds: Optional[int]) -> str:
    """
    Convert Unix seconds to an RFC 7231 IMF-fixdate string in UTC.

    Args:
        epoch_seconds: Launch time in seconds since the epoch

    Returns:
        e.g. "Tue, 14 Nov 2023 22:13:20 GMT", or "UNKNOWN" when no time is available
    """
    if not epoch_seconds:
        logger.warning("No launch date epoch value exists", epoch=epoch_seconds)
        return UNKNOWN

    return formatdate(int(epoch_seconds), usegmt=True)
