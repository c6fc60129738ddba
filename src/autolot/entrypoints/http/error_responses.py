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
                "field": "pageSize",
                "message": "Input should be less than or equal to 100",
                "code": "less_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Every error body carries `success: false` so clients can branch on the
    same flag they read from successful envelopes.

    Examples:
        Simple error:
            {
                "success": false,
                "message": "Vehicle with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with fields:
            {
                "success": false,
                "message": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "page", "message": "Input should be greater than or equal to 1", "code": "greater_than_equal"}
                ]
            }
    """

    success: bool = False
    message: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "success": False,
                    "message": "Vehicle with identifier '42' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "success": False,
                    "message": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "pageSize",
                            "message": "Input should be less than or equal to 100",
                            "code": "less_than_equal",
                        }
                    ],
                },
            ]
        }
    )
