# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Problem Details body returned for every non-2xx response.

    See https://datatracker.ietf.org/doc/html/rfc7807. ``errors`` is an
    extension member carrying one message per rejected request field.
    """

    type: str = Field(
        default="about:blank",
        description="URI reference identifying the problem type.",
    )
    title: str = Field(description="Short human-readable summary of the problem.")
    status: int = Field(description="HTTP status code.")
    detail: str = Field(
        default="",
        description="Explanation of what was wrong with this request.",
    )
    request_id: str = Field(
        default="",
        description="Correlation ID for tracing this request in logs.",
    )
    errors: list[str] = Field(
        default_factory=list,
        description="Per-field messages when the request body failed schema checks.",
    )
