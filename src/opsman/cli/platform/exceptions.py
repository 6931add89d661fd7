"""Exception classes for the Ops Manager client."""

from __future__ import annotations

from typing import Any


class OpsManagerError(Exception):
    """Base exception for all Ops Manager client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(OpsManagerError):
    """Local input is unusable (missing file, bad value).

    Raised before any network call is attempted.
    """


class APIError(OpsManagerError):
    """Error returned from the Ops Manager API.

    Attributes:
        status_code: HTTP status code, or 0 when the request never got a
            response (connection refused, TLS failure, timeout).
        message: Error message.
        details: Additional error details from the API.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"


class AuthenticationError(APIError):
    """The token authority rejected the operator's credentials.

    This error is raised when:
    - The username or password is wrong
    - The authority could not be reached during the exchange
    - The authority answered without an access token
    """


class WrongPassphraseError(APIError):
    """The decryption passphrase was rejected by the appliance."""

    def __init__(
        self,
        message: str = "Wrong decryption passphrase",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(403, message, details)
