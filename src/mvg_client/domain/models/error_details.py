"""Transport failure details."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetails(BaseModel):
    """Why an MVG API request failed before a body could be decoded."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = Field(
        default=None, description="HTTP status of a non-2xx response; None for connection failures"
    )
    reason: str = Field(description="HTTP reason phrase or the underlying network error")
