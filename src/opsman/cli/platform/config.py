"""Ops Manager client configuration constants."""

import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .exceptions import InvalidInputError


def _package_version() -> str:
    try:
        return version("opsman-cli")
    except PackageNotFoundError:
        return "unknown"


PACKAGE_VERSION = _package_version()

OPSMAN_TARGET = os.environ.get("OPSMAN_TARGET", "https://localhost")

# Ops Manager appliances ship with self-signed certificates, so certificate
# verification is off unless OPSMAN_VERIFY_TLS is set to a truthy value.
VERIFY_TLS = os.environ.get("OPSMAN_VERIFY_TLS", "").lower() in ("1", "true", "yes")

# No client-side timeout unless one is configured; uploads of large tiles
# can legitimately run for a long time.
OPSMAN_TIMEOUT = os.environ.get("OPSMAN_TIMEOUT")

DEFAULT_USERNAME = os.environ.get("OPSMAN_USERNAME")

# UAA client registered on the appliance for owner-password grants
UAA_CLIENT_ID = "opsman"
UAA_CLIENT_SECRET = ""

OPSMAN_CONFIG_DIR = Path(
    os.environ.get("OPSMAN_CONFIG_DIR", str(Path.home() / ".opsman"))
)
CREDENTIALS_FILE = OPSMAN_CONFIG_DIR / "credentials.json"
USER_AGENT = f"opsman-cli/{PACKAGE_VERSION}"


def get_timeout(value: str | None = OPSMAN_TIMEOUT) -> float | None:
    """Parse the request timeout setting.

    Args:
        value: Timeout in seconds as text, unset or empty for no timeout.

    Returns:
        Timeout in seconds, or None.

    Raises:
        InvalidInputError: If the value is not a positive number.
    """
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise InvalidInputError(
            f"Invalid OPSMAN_TIMEOUT {value!r}: expected a number of seconds"
        ) from None
    if timeout <= 0:
        raise InvalidInputError(f"Invalid OPSMAN_TIMEOUT {value!r}: must be positive")
    return timeout
