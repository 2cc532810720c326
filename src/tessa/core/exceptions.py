"""
Custom exceptions for the application.

This module defines domain-specific exceptions for better error handling
and more meaningful error messages throughout the application. Every
exception carries the HTTP status the API layer answers with, so the
handlers in core.error_handlers never need to inspect exception types.
"""

from typing import Optional, Any, Dict


class ApplicationException(Exception):
    """Base exception for all application-specific exceptions."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DatabaseException(ApplicationException):
    """Exception raised for database-related errors."""
    error_code = "DATABASE_ERROR"


class ValidationException(ApplicationException):
    """Exception raised for validation errors."""
    status_code = 400
    error_code = "VALIDATION_ERROR"


class NotFoundException(ApplicationException):
    """Exception raised when a requested resource is not found."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any):
        message = f"{resource} not found"
        super().__init__(message, {"resource": resource, "identifier": identifier})


class ConflictException(ApplicationException):
    """Exception raised when a request conflicts with the stored state."""

    status_code = 409
    error_code = "CONFLICT"


class DuplicateException(ConflictException):
    """Exception raised when attempting to create a duplicate resource."""

    def __init__(self, resource: str, field: str, value: Any):
        message = f"{resource} with this {field} already exists"
        super().__init__(message, {"resource": resource, "field": field, "value": value})


class ConfigurationException(ApplicationException):
    """Exception raised for configuration-related errors."""
    error_code = "CONFIGURATION_ERROR"


class UnauthorizedException(ApplicationException):
    """Exception raised when a caller cannot be authenticated."""

    status_code = 401
    error_code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized Token. Access Denied"):
        super().__init__(message)


class TokenExpiredException(UnauthorizedException):
    """Exception raised when the caller's identity token has expired."""

    error_code = "TOKEN_EXPIRED"

    def __init__(self, message: str = "The access token expired"):
        super().__init__(message)


class ExternalServiceException(ApplicationException):
    """Exception raised when an external service fails."""

    status_code = 502
    error_code = "EXTERNAL_SERVICE_ERROR"

    def __init__(self, service: str, message: str, details: Optional[Dict[str, Any]] = None):
        full_message = f"{service} error: {message}"
        details = details or {}
        details["service"] = service
        super().__init__(full_message, details)


class IdentityProviderException(ExternalServiceException):
    """Exception raised for identity provider (Firebase Auth) errors."""

    error_code = "IDENTITY_PROVIDER_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("Identity provider", message, details)


class CustomClaimsException(ApplicationException):
    """Exception raised when custom claims cannot be attached to an identity."""

    error_code = "CUSTOM_CLAIMS_ERROR"

    def __init__(self, uid: str):
        super().__init__("Error setting custom claims", {"uid": uid})


class OrchestrationException(ApplicationException):
    """
    Exception raised when a cross-store account workflow fails.

    The stores are consistent again when this is raised: either the
    compensating action succeeded or nothing needed compensating.
    """

    error_code = "ORCHESTRATION_FAILED"


class DataInconsistencyException(ApplicationException):
    """
    Exception raised when a compensating action itself failed.

    The account store and the identity provider disagree about the
    record and need manual reconciliation. Not a subclass of
    OrchestrationException.
    """

    error_code = "DATA_INCONSISTENCY"
