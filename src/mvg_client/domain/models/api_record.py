"""Base model for records decoded from the MVG API."""

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

# Integer ranges as observed in the upstream payloads
UInt32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]
Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]


class ApiRecord(BaseModel):
    """Immutable record with camelCase JSON keys and individually optional fields.

    The upstream API is not contractually stable, so each field is validated on
    its own: a value that is missing, null or of an incompatible type leaves
    that field as None instead of failing the whole record. Unknown keys are
    ignored. Records can be built by field name in Python; the response
    decoder matches the camelCase keys only.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _absent_on_mismatch(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None

    def to_payload(self) -> dict[str, Any]:
        """Return the record as an upstream-style dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Return the record serialized as upstream-style JSON."""
        return self.model_dump_json(by_alias=True)
