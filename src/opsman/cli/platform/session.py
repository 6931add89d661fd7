"""Bearer-token session lifecycle.

The session manager owns the token for one command invocation. Validity is
checked against the authority on every use instead of tracking expiry
locally; an invalid or missing token triggers an interactive exchange.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from .types import Credentials
from .uaa import UAAClient

logger = logging.getLogger(__name__)


class CredentialPrompt(Protocol):
    """Collects the operator's identity and secret."""

    def ask_credentials(self) -> tuple[str, str]:
        """Return a (username, password) pair."""
        ...


@dataclass
class Session:
    """Token state for one command invocation."""

    access_token: str | None = None


class SessionManager:
    """Hands out a valid bearer token, re-authenticating when needed."""

    def __init__(
        self,
        uaa: UAAClient,
        prompt: CredentialPrompt,
        load_credentials: Callable[[], Credentials | None] | None = None,
        save_credentials: Callable[[Credentials], None] | None = None,
        clear_credentials: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the session manager.

        Args:
            uaa: Token authority client.
            prompt: Collaborator that asks the operator for credentials.
            load_credentials: Optional loader for a previously stored session.
            save_credentials: Optional hook to persist a new session.
            clear_credentials: Optional hook to drop the persisted session.
        """
        self._uaa = uaa
        self._prompt = prompt
        self._load = load_credentials
        self._save = save_credentials
        self._clear = clear_credentials
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        """Current session, populated lazily from the credential store."""
        if self._session is None:
            creds = self._load() if self._load else None
            self._session = Session(access_token=creds.token if creds else None)
        return self._session

    def get_valid_token(self) -> str:
        """Return a token the authority currently accepts.

        Returns:
            Bearer token.

        Raises:
            AuthenticationError: If re-authentication is needed and the
                credential exchange fails.
        """
        token = self.session.access_token
        if not self._uaa.check_token(token):
            logger.debug("No valid token in session, re-authenticating")
            token = self._authenticate()
        return token

    def has_valid_token(self) -> bool:
        """Check the current token without triggering a login."""
        return self._uaa.check_token(self.session.access_token)

    def login(self, force: bool = False) -> str:
        """Ensure a session exists, optionally discarding the current one.

        Args:
            force: Always perform a fresh credential exchange.

        Returns:
            Bearer token.
        """
        if force:
            return self._authenticate()
        return self.get_valid_token()

    def logout(self) -> None:
        """Forget the current session and the persisted one."""
        self._session = Session()
        if self._clear:
            self._clear()

    def _authenticate(self) -> str:
        username, password = self._prompt.ask_credentials()
        creds = self._uaa.password_grant(username, password)
        self.session.access_token = creds.token
        if self._save:
            self._save(creds)
        return creds.token
