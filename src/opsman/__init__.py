"""opsman - command line client for the Ops Manager API.

Core API:
    - OpsManagerClient: uploads, unlock and VM type management
    - SessionManager: bearer-token lifecycle against UAA
    - classify_artifact: stemcell vs product tile detection

Example:
    from opsman import OpsManagerClient

    client = OpsManagerClient("https://opsman.example.com")
    client.unlock("decryption passphrase")
"""

from opsman.cli.platform import (
    OpsManagerClient,
    SessionManager,
    UAAClient,
    UploadTarget,
    classify_artifact,
)
from opsman.cli.platform.config import PACKAGE_VERSION as __version__

__all__ = [
    "OpsManagerClient",
    "SessionManager",
    "UAAClient",
    "UploadTarget",
    "classify_artifact",
    "__version__",
]
