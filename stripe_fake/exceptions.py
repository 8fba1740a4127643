"""
Fake Stripe client exceptions.

Standalone exception hierarchy for the stripe-fake package.
No dependencies on the stripe SDK's own error classes.
"""

from typing import Any


class StripeFakeError(Exception):
    """Base exception for all stripe-fake errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details})"


class FakeNotRegistered(StripeFakeError, LookupError):
    """No exact or wildcard fixture matches the called method."""

    def __init__(self, method: str):
        super().__init__(
            f"No fake registered for Stripe method [{method}]. "
            f"Register a fake using client.fake(\"{method}\", {{...}}) in your test.",
            details={"method": method},
        )
        self.method = method


class InvalidMethodKeyError(StripeFakeError, ValueError):
    """Method key is not of the form "<service>.<operation>"."""

    pass


class StripeFakeConfigError(StripeFakeError):
    """Invalid configuration provided."""

    pass


class FakeAssertionError(StripeFakeError, AssertionError):
    """A recorded-call assertion did not hold."""

    pass
