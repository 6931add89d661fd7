"""Client for the UAA token authority embedded in Ops Manager."""

from __future__ import annotations

import json
import logging

import requests

from .config import (
    OPSMAN_TARGET,
    UAA_CLIENT_ID,
    UAA_CLIENT_SECRET,
    USER_AGENT,
    VERIFY_TLS,
)
from .exceptions import AuthenticationError
from .types import Credentials

logger = logging.getLogger(__name__)


class UAAClient:
    """Token introspection and owner-password grants against UAA."""

    def __init__(
        self,
        base_url: str = OPSMAN_TARGET,
        timeout: float | None = None,
        verify: bool = VERIFY_TLS,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the UAA client.

        Args:
            base_url: Base URL of the Ops Manager appliance.
            timeout: Request timeout in seconds, None for no timeout.
            verify: Whether to verify the appliance's TLS certificate.
            session: Optional requests session to share with the API client.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify = verify
        self._session = session or requests.Session()
        self._auth = (UAA_CLIENT_ID, UAA_CLIENT_SECRET)

    def check_token(self, token: str | None) -> bool:
        """Ask the authority whether a bearer token is still accepted.

        Args:
            token: Bearer token, possibly absent.

        Returns:
            True only when the authority answers 200. Rejections and transport
            failures both count as invalid.
        """
        if not token:
            return False
        try:
            resp = self._session.request(
                "GET",
                f"{self.base_url}/uaa/check_token",
                auth=self._auth,
                headers={"User-Agent": USER_AGENT},
                data={"token_type": "bearer", "token": token},
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.exceptions.RequestException as e:
            logger.debug("Token check failed: %s", e)
            return False
        logger.debug("Token check returned %s", resp.status_code)
        return resp.status_code == 200

    def password_grant(self, username: str, password: str) -> Credentials:
        """Exchange operator credentials for a bearer token.

        Args:
            username: Operator user name.
            password: Operator password.

        Returns:
            Credentials carrying the new access token.

        Raises:
            AuthenticationError: If the authority rejects the credentials or
                cannot be reached.
        """
        try:
            resp = self._session.request(
                "POST",
                f"{self.base_url}/uaa/oauth/token",
                auth=self._auth,
                headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
                data={
                    "grant_type": "password",
                    "username": username,
                    "password": password,
                },
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.exceptions.ConnectionError as e:
            raise AuthenticationError(0, "Cannot connect to UAA") from e
        except requests.exceptions.Timeout as e:
            raise AuthenticationError(0, "UAA request timed out") from e
        except requests.exceptions.RequestException as e:
            raise AuthenticationError(0, "UAA request failed") from e

        try:
            data = resp.json() if resp.content else {}
        except json.JSONDecodeError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if resp.status_code != 200:
            detail = data.get("error_description") or data.get("error")
            raise AuthenticationError(
                resp.status_code,
                detail or resp.reason or "Authentication failed",
                {"error": data["error"]} if "error" in data else None,
            )

        token = data.get("access_token")
        if not token:
            raise AuthenticationError(
                resp.status_code,
                "Invalid response from UAA: missing access token",
            )

        logger.debug("Obtained token for user %s", username)
        return Credentials(
            token=token,
            token_type=data.get("token_type", "bearer"),
            refresh_token=data.get("refresh_token"),
            expires_in=data.get("expires_in"),
            target=self.base_url,
        )
