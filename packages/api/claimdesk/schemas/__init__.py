# This project was developed with assistance from AI tools.
"""Shared schema components."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health status of a single service component."""

    name: str
    status: str
    message: str
    version: str | None = None
