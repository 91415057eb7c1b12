"""
URLs of the SpaceX API resources used by sxl.
"""

from dataclasses import dataclass

from ..models.schemas import LaunchKind

DEFAULT_API_BASE_URL = "https://api.spacexdata.com/v4"


@dataclass(frozen=True)
class Endpoints:
    """Builds resource URLs relative to one API base URL."""
    base_url: str = DEFAULT_API_BASE_URL

    def __post_init__(self):
        object.__setattr__(self, 'base_url', self.base_url.rstrip('/'))

    def launch(self, kind: LaunchKind) -> str:
        return f"{self.base_url}/launches/{LaunchKind(kind).value}"

    def payload(self, payload_id: str) -> str:
        return f"{self.base_url}/payloads/{payload_id}"

    def launchpad(self, launchpad_id: str) -> str:
        return f"{self.base_url}/launchpads/{launchpad_id}"
