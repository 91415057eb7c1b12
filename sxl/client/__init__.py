"""
Client for the public SpaceX REST API.
"""

from .api_client import SpaceXApiClient
from .endpoints import Endpoints, DEFAULT_API_BASE_URL
from .errors import FetchError, ResponseParseError

__all__ = [
    'SpaceXApiClient',
    'Endpoints',
    'DEFAULT_API_BASE_URL',
    'FetchError',
    'ResponseParseError',
]
