"""Errors raised by the MVG client."""

from mvg_client.domain.models.error_details import ErrorDetails


class MvgApiError(Exception):
    """Base class for all MVG client errors."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(MvgApiError):
    """The request could not be completed or returned a non-success status."""

    def __init__(self, details: ErrorDetails, url: str | None = None) -> None:
        if details.status_code is not None:
            message = f"HTTP {details.status_code}: {details.reason}"
        else:
            message = details.reason
        super().__init__(message, url)
        self.details = details

    @property
    def status_code(self) -> int | None:
        return self.details.status_code


class DecodeError(MvgApiError):
    """The response body is not valid JSON or does not have the expected shape."""

    def __init__(self, message: str, url: str | None = None, body_excerpt: str = "") -> None:
        super().__init__(message, url)
        self.body_excerpt = body_excerpt
