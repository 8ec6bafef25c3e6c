from authflow.schemas.auth import AuthSuccessResponse
from authflow.schemas.common import (
    ApiResponse,
    ErrorResponse,
    MetaResponse,
    create_error_response,
    create_success_response,
)

__all__ = [
    "AuthSuccessResponse",
    "ApiResponse",
    "ErrorResponse",
    "MetaResponse",
    "create_error_response",
    "create_success_response",
]
