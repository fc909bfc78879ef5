# =============================================================================
# app/exceptions.py - Domain Exceptions
# =============================================================================
# Centralized exception types for the flyer fetcher and app shell.
# Following the principle: "Errors should tell HOW to fix, not just WHAT failed."
#
# The fetch flow catches all of these at the top level and turns them into a
# single failure result, so callers never need to tell them apart.
# =============================================================================

from typing import Any

from lib.utils import ApplicationError


class FlyerTownException(ApplicationError):
    """
    Base exception for FlyerTown.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "FLYERTOWN_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


# =============================================================================
# Credential / Auth Exceptions
# =============================================================================

class MissingCredentialsError(FlyerTownException):
    """Raised when the login email or password is not configured."""

    def __init__(self, missing: list[str]):
        super().__init__(
            message=f"Missing credentials: {', '.join(missing)}",
            code="MISSING_CREDENTIALS",
            suggestion="Set POCKETBASE_EMAIL and POCKETBASE_PASSWORD in the environment or .env file",
            details={"missing": missing}
        )


class AuthenticationError(FlyerTownException):
    """Raised when PocketBase rejects the password login."""

    def __init__(self, collection: str, reason: str, status_code: int | None = None):
        super().__init__(
            message=f"Failed to authenticate against '{collection}': {reason}",
            code="AUTH_FAILED",
            suggestion="Check the account exists in the auth collection and the password is correct",
            details={"collection": collection, "status_code": status_code}
        )


# =============================================================================
# Record Listing Exceptions
# =============================================================================

class RecordListError(FlyerTownException):
    """Raised when the list request for a collection fails."""

    def __init__(self, collection: str, reason: str, status_code: int | None = None):
        super().__init__(
            message=f"Failed to list records of '{collection}': {reason}",
            code="LIST_FAILED",
            suggestion="Check the collection name and that the account can read it",
            details={"collection": collection, "status_code": status_code}
        )


class MalformedResponseError(FlyerTownException):
    """Raised when PocketBase returns a body that does not match the expected shape."""

    def __init__(self, endpoint: str, reason: str):
        super().__init__(
            message=f"Unexpected response from {endpoint}: {reason}",
            code="MALFORMED_RESPONSE",
            suggestion="Check that POCKETBASE_URL points at a PocketBase server",
            details={"endpoint": endpoint}
        )


# =============================================================================
# App Shell Exceptions
# =============================================================================

class InvalidShellConfigError(FlyerTownException):
    """Raised when the native app shell descriptor fails validation."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid app shell config: {reason}",
            code="INVALID_SHELL_CONFIG",
            suggestion="Provide a non-empty appId and appName",
        )
