"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ViolationResponse(BaseModel):
    """A single field-level validation failure."""

    field: str = Field(..., description="Name of the offending field")
    message: str = Field(..., description="What is wrong with it")


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")
    violations: list[ViolationResponse] | None = Field(
        None,
        description="Field violations (validation errors only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "User with ID 7 not found", "code": "USER_NOT_FOUND"},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    api_versions: list[str] = Field(..., description="Mounted API versions")
