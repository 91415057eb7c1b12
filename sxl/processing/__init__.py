"""
Launch data processing: extraction, date formatting and enrichment.
"""

from .extractors import extract_launch, extract_payload, extract_launchpad
from .date_formatter import format_launch_date
from .enrichment import LaunchEnricher
from .launch_pipeline import run_launch_report

__all__ = [
    'extract_launch',
    'extract_payload',
    'extract_launchpad',
    'format_launch_date',
    'LaunchEnricher',
    'run_launch_report',
]
