# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common error types used by the external service clients.
# =============================================================================

from typing import Any


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class MyServiceError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="MY_SERVICE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result


class DependencyConnectionError(ApplicationError):
    """
    An external dependency could not be brought up at startup.

    Raised by the service clients' connect() methods. The bootstrap
    sequence treats it (and any other exception) as fatal.
    """

    def __init__(self, message: str, code: str = "DEPENDENCY_CONNECTION_FAILED", **kwargs):
        super().__init__(message, code=code, **kwargs)
