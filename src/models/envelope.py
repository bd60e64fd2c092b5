"""The {success, message, data} envelope returned to API and CLI consumers."""

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from src.pipeline.errors import MalformedAIResponse, MissingRequiredFields

GENERATION_FAILED_MESSAGE = (
    "Generation failed, please retry (a smaller number of questions may help)"
)


def status_code_for(error: Exception) -> int:
    """HTTP status code a request handler should use for a pipeline error."""
    if isinstance(error, (MissingRequiredFields, ValidationError)):
        return 400
    return 500


class ServiceResponse(BaseModel):
    """Response envelope shared by every operation."""

    success: bool
    message: str
    data: Any | None = None
    error: str | None = Field(None, description="Error detail for failures")
    errors: list[str] | None = Field(None, description="Validation error list")

    @classmethod
    def ok(cls, data: Any = None, message: str = "Success") -> "ServiceResponse":
        """Build a success envelope."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def from_error(cls, error: Exception) -> "ServiceResponse":
        """Build a failure envelope for an exception."""
        if isinstance(error, ValidationError):
            return cls(
                success=False,
                message="Validation failed",
                errors=[
                    f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}"
                    for e in error.errors()
                ],
            )
        if isinstance(error, MissingRequiredFields):
            return cls(
                success=False,
                message="Validation failed",
                error=str(error),
                errors=error.missing,
            )
        if isinstance(error, MalformedAIResponse):
            return cls(
                success=False,
                message=GENERATION_FAILED_MESSAGE,
                error=error.reason,
            )
        return cls(success=False, message="Internal server error", error=str(error))

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict without unset optional keys."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)
