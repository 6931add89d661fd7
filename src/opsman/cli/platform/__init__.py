"""Ops Manager API client."""

from .artifacts import UploadTarget, classify_artifact
from .auth import clear_credentials, get_credentials, is_authenticated, save_credentials
from .client import OpsManagerClient
from .config import CREDENTIALS_FILE, OPSMAN_TARGET, VERIFY_TLS
from .exceptions import (
    APIError,
    AuthenticationError,
    InvalidInputError,
    OpsManagerError,
    WrongPassphraseError,
)
from .session import CredentialPrompt, Session, SessionManager
from .types import Credentials, VmType
from .uaa import UAAClient
from .vm_types import merge_vm_type

__all__ = [
    # Auth
    "save_credentials",
    "get_credentials",
    "clear_credentials",
    "is_authenticated",
    # Clients
    "OpsManagerClient",
    "UAAClient",
    # Sessions
    "CredentialPrompt",
    "Session",
    "SessionManager",
    # Config
    "OPSMAN_TARGET",
    "CREDENTIALS_FILE",
    "VERIFY_TLS",
    # Errors
    "OpsManagerError",
    "InvalidInputError",
    "APIError",
    "AuthenticationError",
    "WrongPassphraseError",
    # Artifacts
    "UploadTarget",
    "classify_artifact",
    # VM types
    "merge_vm_type",
    # Types
    "Credentials",
    "VmType",
]
