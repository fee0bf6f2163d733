"""Decoder for MVG API JSON responses."""

import logging
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import from_json

from mvg_client.domain.errors import DecodeError

logger = logging.getLogger(__name__)

# Number of body characters kept in decode errors
BODY_EXCERPT_LENGTH = 200


@lru_cache(maxsize=None)
def _adapter_for(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _excerpt(body: bytes | str) -> str:
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    return text[:BODY_EXCERPT_LENGTH]


def _describe(error: ValidationError) -> str:
    """Summarize the first structural error of a validation failure."""
    first = error.errors()[0]
    location = "/".join(str(part) for part in first["loc"]) or "<root>"
    return f"Unexpected response shape at {location}: {first['msg']}"


class ResponseDecoder:
    """Decodes raw response bodies into domain records.

    Individual fields degrade to None when missing or mistyped (see ApiRecord);
    only a body that is not JSON or not of the expected top-level shape fails.
    Records are matched by their camelCase keys only.
    """

    @staticmethod
    def decode(body: bytes | str, shape: Any, url: str | None = None) -> Any:
        """Parse a body as JSON and validate it against the given shape.

        Args:
            body: Raw response body.
            shape: Target type, e.g. list[Station].
            url: Request URL, attached to errors.

        Returns:
            The decoded value.

        Raises:
            DecodeError: If the body is not valid JSON or has the wrong shape.
        """
        try:
            # NaN and Infinity are not JSON
            data = from_json(body, allow_inf_nan=False)
        except ValueError as e:
            message = f"Response is not valid JSON: {e}"
            logger.warning(f"Could not decode response from {url}: {message}")
            raise DecodeError(message, url, _excerpt(body)) from e

        try:
            result = _adapter_for(shape).validate_python(data, by_alias=True, by_name=False)
        except ValidationError as e:
            message = _describe(e)
            logger.warning(f"Could not decode response from {url}: {message}")
            raise DecodeError(message, url, _excerpt(body)) from e

        if isinstance(result, list):
            logger.debug(f"Decoded {len(result)} item(s) from {url}")
        return result
