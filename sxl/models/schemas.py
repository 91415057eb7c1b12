"""
Pydantic models for launch, payload and launchpad records.
"""
from pydantic import BaseModel, Field, validator
from typing import Optional, List
from enum import Enum


UNKNOWN = "UNKNOWN"
UNKNOWN_SUMMARY = "Unknown"


class ResourceKind(str, Enum):
    """Kinds of resource fetched from the SpaceX API."""
    LAUNCH = "launch"
    PAYLOAD = "payload"
    LAUNCHPAD = "launchpad"


class LaunchKind(str, Enum):
    """The two launch resources that can be reported."""
    LATEST = "latest"
    NEXT = "next"

    @property
    def label(self) -> str:
        """Heading used when the launch is rendered."""
        return "Latest" if self is LaunchKind.LATEST else "Next Scheduled"


def _unknown(value, field_name: str) -> str:
    """Return the value as text, or an 'UNKNOWN <field>' placeholder."""
    if value is None:
        return f"{UNKNOWN} {field_name}"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value) if value else f"{UNKNOWN} {field_name}"
    return str(value)


class LaunchRecord(BaseModel):
    """A single launch plus the details merged in from its dependent lookups."""
    flight_number: Optional[int] = Field(None, description="Sequential SpaceX flight number")
    flight_name: Optional[str] = Field(None, description="Mission name")
    details: Optional[str] = Field(None, description="Free text description of the flight")
    launch_epoch: Optional[int] = Field(None, description="Launch time in Unix seconds (UTC)")
    payload_ref: Optional[str] = Field(None, description="Identifier of the primary payload")
    launchpad_ref: Optional[str] = Field(None, description="Identifier of the launchpad")
    succeeded: Optional[bool] = Field(None, description="Outcome, absent until the launch has flown")
    date_precision: Optional[str] = Field(None, description="Precision of the launch date, e.g. hour or day")

    display_date: Optional[str] = Field(None, description="Launch date formatted for display")
    payload_summary: Optional[str] = Field(None, description="One sentence describing the payload")
    launchpad_summary: Optional[str] = Field(None, description="One sentence describing the launchpad")

    @validator('payload_ref', 'launchpad_ref', pre=True)
    def validate_reference(cls, v):
        """Accept a bare id or a list of ids; the first id of a list is used."""
        if isinstance(v, (list, tuple)):
            v = v[0] if v else None
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @validator('launch_epoch', pre=True)
    def validate_launch_epoch(cls, v):
        """Treat a zero or empty epoch as missing."""
        return v or None

    class Config:
        """Pydantic configuration."""
        validate_assignment = True


class PayloadSummary(BaseModel):
    """Payload fields used to describe what a launch carries."""
    name: Optional[str] = None
    type: Optional[str] = None
    customers: Optional[List[str]] = None
    manufacturers: Optional[List[str]] = None

    def sentence(self) -> str:
        return (
            f"Payload is: {_unknown(self.name, 'name')} ({_unknown(self.type, 'type')}) "
            f"for customer: {_unknown(self.customers, 'customer')}. "
            f"Payload manufactured by: {_unknown(self.manufacturers, 'manufacturer')}."
        )


class LaunchpadSummary(BaseModel):
    """Launchpad fields used to describe where a launch flies from."""
    full_name: Optional[str] = None
    region: Optional[str] = None
    launch_successes: Optional[int] = None
    launch_attempts: Optional[int] = None

    def sentence(self) -> str:
        return (
            f"{_unknown(self.full_name, 'full name')} ({_unknown(self.region, 'region')}). "
            f"Launched {_unknown(self.launch_successes, 'launch successes')} "
            f"of {_unknown(self.launch_attempts, 'launch attempts')} attempts."
        )
