"""
Data models for launch, payload and launchpad records.
"""

from .schemas import (
    ResourceKind,
    LaunchKind,
    LaunchRecord,
    PayloadSummary,
    LaunchpadSummary,
    UNKNOWN,
    UNKNOWN_SUMMARY,
)

__all__ = [
    'ResourceKind',
    'LaunchKind',
    'LaunchRecord',
    'PayloadSummary',
    'LaunchpadSummary',
    'UNKNOWN',
    'UNKNOWN_SUMMARY',
]
