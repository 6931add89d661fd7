"""Local credential store for the UAA session.

One session is kept on disk, tagged with the Ops Manager URL its token was
issued for. Lookups for a different appliance treat the store as empty.
"""

import logging

from pydantic import ValidationError

from .config import CREDENTIALS_FILE
from .types import Credentials

logger = logging.getLogger(__name__)


def _same_target(stored: str | None, target: str) -> bool:
    return stored is not None and stored.rstrip("/") == target.rstrip("/")


def save_credentials(creds: Credentials) -> None:
    """Save credentials to the config directory.

    Args:
        creds: Credentials to save, replacing any stored session.
    """
    CREDENTIALS_FILE.parent.mkdir(parents=True, exist_ok=True)
    CREDENTIALS_FILE.write_text(creds.model_dump_json())
    # Restrict permissions to owner only
    CREDENTIALS_FILE.chmod(0o600)


def get_credentials(target: str | None = None) -> Credentials | None:
    """Load the stored session.

    Args:
        target: Only return a session issued for this Ops Manager URL.
            None returns whatever is stored.

    Returns:
        Credentials if found, parseable and matching ``target``, None
        otherwise.
    """
    if not CREDENTIALS_FILE.exists():
        return None
    try:
        creds = Credentials.model_validate_json(CREDENTIALS_FILE.read_text())
    except (ValidationError, ValueError):
        logger.debug("Ignoring unreadable credentials file %s", CREDENTIALS_FILE)
        return None
    if target is not None and not _same_target(creds.target, target):
        logger.debug("Stored session belongs to %s, not %s", creds.target, target)
        return None
    return creds


def clear_credentials() -> None:
    """Remove stored credentials."""
    if CREDENTIALS_FILE.exists():
        CREDENTIALS_FILE.unlink()


def is_authenticated(target: str | None = None) -> bool:
    """Check if a session has been stored.

    Args:
        target: Only count a session issued for this Ops Manager URL.

    Returns:
        True if matching credentials exist, False otherwise. The stored token
        may still have expired.
    """
    return get_credentials(target) is not None
