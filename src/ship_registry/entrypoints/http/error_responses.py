"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "speed",
                "message": "Must be between 0.01 and 0.99",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Ship with identifier '7' not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "BAD_REQUEST",
                "errors": [
                    {"field": "speed", "message": "Must be between 0.01 and 0.99", "code": "OUT_OF_RANGE"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Ship with identifier '7' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "BAD_REQUEST",
                    "errors": [
                        {
                            "field": "speed",
                            "message": "Must be between 0.01 and 0.99",
                            "code": "OUT_OF_RANGE",
                        },
                        {
                            "field": "crew_size",
                            "message": "Must be between 1 and 9999",
                            "code": "OUT_OF_RANGE",
                        },
                    ],
                },
            ]
        }
    )
