"""
Standardized Error Handling - Consistent API Error Responses
Maps entry store failures to structured HTTP error responses
"""

from functools import wraps
from typing import Optional, Dict, Any
from datetime import datetime
from fastapi import HTTPException, status
from services.entries.exceptions import KeyNotFound, MalformedValue, StoreUnavailable
from utils.logger import logger
import traceback

class APIError(HTTPException):
    """
    Standardized API Error with consistent response format

    Provides structured error responses with optional details,
    error codes, and automatic logging.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
        log_error: bool = True
    ):
        """
        Initialize standardized API error

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            details: Additional error details (optional)
            error_code: Machine-readable error code (optional)
            log_error: Whether to log the error (default: True)
        """
        error_detail = create_error_response(status_code, message, details, error_code)

        if log_error:
            self._log_error(status_code, message, error_code)

        super().__init__(status_code=status_code, detail=error_detail)

    def _log_error(self, status_code: int, message: str, error_code: Optional[str]):
        """Log error with appropriate level based on status code"""
        if status_code >= 500:
            logger.error(f"Server Error [{error_code}]: {message}")
        elif status_code >= 400:
            logger.warning(f"Client Error [{error_code}]: {message}")
        else:
            logger.info(f"Error Response [{error_code}]: {message}")

class NotFoundError(APIError):
    """Key not found error (404)"""
    def __init__(self, key: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            message=f"Key '{key}' not found",
            details=details,
            error_code="KEY_NOT_FOUND"
        )

class MalformedValueError(APIError):
    """Stored value cannot be parsed (500)"""
    def __init__(self, key: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=f"Value stored under '{key}' is malformed",
            details=details,
            error_code="MALFORMED_VALUE"
        )

class ServerError(APIError):
    """Internal server error (500)"""
    def __init__(self, message: str = "Internal server error", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=message,
            details=details,
            error_code="SERVER_ERROR"
        )

class ServiceUnavailableError(APIError):
    """Service unavailable error (503)"""
    def __init__(self, service: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            message=f"{service} service unavailable",
            details=details,
            error_code="STORE_UNAVAILABLE"
        )

# Error Handler Decorators

def handle_api_errors(func):
    """
    Decorator converting entry store exceptions into APIErrors

    Usage:
        @router.get("/{key}")
        @handle_api_errors
        async def my_endpoint(key: str):
            ...
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except APIError:
            raise
        except KeyNotFound as e:
            raise NotFoundError(e.key)
        except MalformedValue as e:
            raise MalformedValueError(e.key, {"reason": e.reason})
        except StoreUnavailable as e:
            raise ServiceUnavailableError(
                "Key-value store",
                {"operation": e.operation, "reason": e.reason}
            )
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {str(e)}")
            logger.error(traceback.format_exc())
            raise ServerError(
                "An unexpected error occurred",
                {"function": func.__name__, "error_type": type(e).__name__}
            )

    return wrapper

# Utility Functions

def create_error_response(
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    error_code: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a standardized error response dictionary

    Useful for manual error response creation without raising exceptions
    """
    response = {
        "error": True,
        "message": message,
        "status_code": status_code,
        "timestamp": datetime.utcnow().isoformat()
    }

    if error_code:
        response["error_code"] = error_code

    if details:
        response["details"] = details

    return response

__all__ = [
    "APIError",
    "NotFoundError",
    "MalformedValueError",
    "ServerError",
    "ServiceUnavailableError",
    "handle_api_errors",
    "create_error_response",
]
