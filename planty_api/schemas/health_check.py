from typing import Optional

from pydantic import BaseModel


class HealthCheckArgument(BaseModel):
    name: Optional[str] = None
    boolValue: bool = False
    textValue: Optional[str] = None


class HealthCheckInput(BaseModel):
    intent: Optional[str] = None
    arguments: Optional[list[HealthCheckArgument]] = None


class HealthCheckRequest(BaseModel):
    """Actions on Google conversation request, reduced to what health probes send."""

    inputs: Optional[list[HealthCheckInput]] = None
