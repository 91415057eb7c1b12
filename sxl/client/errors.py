"""
Exceptions raised while fetching resources from the SpaceX API.
"""

from typing import Optional

from ..models.schemas import ResourceKind


class FetchError(Exception):
    """A resource could not be fetched.

    Carries the kind of resource that failed so the caller can decide how to
    report it and which exit status to use.
    """

    def __init__(self,
                 message: str,
                 resource: ResourceKind,
                 url: Optional[str] = None,
                 status: Optional[int] = None,
                 reason: Optional[str] = None):
        super().__init__(message)
        self.resource = resource
        self.url = url
        self.status = status
        self.reason = reason


class ResponseParseError(FetchError):
    """The response body was not the JSON object that was expected."""
    pass
