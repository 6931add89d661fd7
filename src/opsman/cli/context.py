"""Wiring of clients and sessions for one command invocation."""

from functools import partial

import requests

from .platform.auth import clear_credentials, get_credentials, save_credentials
from .platform.client import OpsManagerClient
from .platform.config import VERIFY_TLS, get_timeout
from .platform.session import SessionManager
from .platform.uaa import UAAClient
from .prompts import ClickCredentialPrompt


def build_session_manager(
    target: str, http: requests.Session | None = None
) -> SessionManager:
    """Create a session manager backed by the local credential store.

    Only a stored session issued for ``target`` is reused.

    Args:
        target: Base URL of the Ops Manager appliance.
        http: Optional requests session shared with the API client.
    """
    uaa = UAAClient(target, timeout=get_timeout(), verify=VERIFY_TLS, session=http)
    return SessionManager(
        uaa,
        ClickCredentialPrompt(),
        load_credentials=partial(get_credentials, target),
        save_credentials=save_credentials,
        clear_credentials=clear_credentials,
    )


def build_client(target: str) -> OpsManagerClient:
    """Create an API client whose session prompts for credentials when needed.

    Args:
        target: Base URL of the Ops Manager appliance.
    """
    http = requests.Session()
    return OpsManagerClient(
        target,
        sessions=build_session_manager(target, http),
        timeout=get_timeout(),
        verify=VERIFY_TLS,
        session=http,
    )
