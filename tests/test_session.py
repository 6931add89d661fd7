"""Tests for the bearer-token session manager."""

from unittest.mock import MagicMock

import pytest

from opsman.cli.platform.exceptions import AuthenticationError
from opsman.cli.platform.session import Session, SessionManager
from opsman.cli.platform.types import Credentials

from .conftest import FakePrompt


@pytest.fixture
def uaa():
    uaa = MagicMock()
    uaa.password_grant.return_value = Credentials(token="fresh-token")
    return uaa


@pytest.fixture
def prompt():
    return FakePrompt()


class TestGetValidToken:
    """Tests for SessionManager.get_valid_token."""

    def test_no_session_triggers_login(self, uaa, prompt):
        """Without a stored token the operator is prompted once."""
        uaa.check_token.return_value = False
        manager = SessionManager(uaa, prompt)

        token = manager.get_valid_token()

        assert token == "fresh-token"
        assert prompt.calls == 1
        uaa.check_token.assert_called_once_with(None)
        uaa.password_grant.assert_called_once_with("admin", "secret")
        assert manager.session.access_token == "fresh-token"

    def test_valid_stored_token_is_reused(self, uaa, prompt):
        """A stored token that the authority accepts is returned as is."""
        uaa.check_token.return_value = True
        manager = SessionManager(
            uaa, prompt, load_credentials=lambda: Credentials(token="stored")
        )

        assert manager.get_valid_token() == "stored"
        assert prompt.calls == 0
        uaa.password_grant.assert_not_called()

    def test_invalid_stored_token_triggers_login(self, uaa, prompt):
        """An expired stored token is replaced through a new exchange."""
        uaa.check_token.return_value = False
        saved = []
        manager = SessionManager(
            uaa,
            prompt,
            load_credentials=lambda: Credentials(token="expired"),
            save_credentials=saved.append,
        )

        assert manager.get_valid_token() == "fresh-token"
        uaa.check_token.assert_called_once_with("expired")
        assert [c.token for c in saved] == ["fresh-token"]

    def test_idempotent_within_validity(self, uaa, prompt):
        """Repeated calls do not re-authenticate while the token is valid."""
        uaa.check_token.side_effect = lambda token: token == "fresh-token"
        manager = SessionManager(uaa, prompt)

        first = manager.get_valid_token()
        second = manager.get_valid_token()

        assert first == second == "fresh-token"
        assert prompt.calls == 1
        assert uaa.password_grant.call_count == 1

    def test_exchange_failure_propagates(self, uaa, prompt):
        """A rejected exchange is fatal and leaves the session empty."""
        uaa.check_token.return_value = False
        uaa.password_grant.side_effect = AuthenticationError(401, "Bad credentials")
        saved = []
        manager = SessionManager(uaa, prompt, save_credentials=saved.append)

        with pytest.raises(AuthenticationError, match="Bad credentials"):
            manager.get_valid_token()

        assert manager.session.access_token is None
        assert saved == []
        assert uaa.password_grant.call_count == 1

    def test_store_is_read_once(self, uaa, prompt):
        """The credential store is only consulted to populate the session."""
        uaa.check_token.return_value = True
        load = MagicMock(return_value=Credentials(token="stored"))
        manager = SessionManager(uaa, prompt, load_credentials=load)

        manager.get_valid_token()
        manager.get_valid_token()

        load.assert_called_once()


class TestLoginLogout:
    """Tests for SessionManager.login and logout."""

    def test_force_login_skips_validation(self, uaa, prompt):
        """Forced login always exchanges credentials."""
        manager = SessionManager(
            uaa, prompt, load_credentials=lambda: Credentials(token="stored")
        )

        assert manager.login(force=True) == "fresh-token"
        uaa.check_token.assert_not_called()
        assert prompt.calls == 1

    def test_login_reuses_valid_session(self, uaa, prompt):
        uaa.check_token.return_value = True
        manager = SessionManager(
            uaa, prompt, load_credentials=lambda: Credentials(token="stored")
        )

        assert manager.login() == "stored"
        assert prompt.calls == 0

    def test_has_valid_token(self, uaa, prompt):
        uaa.check_token.return_value = False
        manager = SessionManager(uaa, prompt)

        assert manager.has_valid_token() is False
        assert prompt.calls == 0

    def test_logout_clears_session_and_store(self, uaa, prompt):
        clear = MagicMock()
        manager = SessionManager(
            uaa,
            prompt,
            load_credentials=lambda: Credentials(token="stored"),
            clear_credentials=clear,
        )
        assert manager.session.access_token == "stored"

        manager.logout()

        assert manager.session == Session()
        clear.assert_called_once()
