"""HTTP client for the Ops Manager API."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import requests
import urllib3
from pydantic import ValidationError

from .artifacts import UploadTarget, classify_artifact
from .config import OPSMAN_TARGET, USER_AGENT, VERIFY_TLS
from .exceptions import APIError, InvalidInputError, WrongPassphraseError
from .types import VmType
from .vm_types import merge_vm_type

if TYPE_CHECKING:
    from .session import SessionManager

logger = logging.getLogger(__name__)

UploadCallback = Callable[[str, UploadTarget], None]


class OpsManagerClient:
    """HTTP client for the Ops Manager API."""

    def __init__(
        self,
        base_url: str = OPSMAN_TARGET,
        sessions: SessionManager | None = None,
        timeout: float | None = None,
        verify: bool = VERIFY_TLS,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the Ops Manager API client.

        Args:
            base_url: Base URL of the Ops Manager appliance.
            sessions: Session manager providing bearer tokens. Only needed
                for authenticated endpoints.
            timeout: Request timeout in seconds, None for no timeout.
            verify: Whether to verify the appliance's TLS certificate.
            session: Optional requests session to reuse.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify = verify
        self.sessions = sessions
        self._session = session or requests.Session()
        if not verify:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            logger.debug("TLS certificate verification disabled for %s", base_url)

    def _get_headers(self, authenticated: bool = True) -> dict[str, str]:
        """Get request headers.

        Args:
            authenticated: Whether to include the bearer token.

        Returns:
            Headers dictionary.

        Raises:
            APIError: If authenticated=True but no session manager is set.
        """
        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
        }
        if authenticated:
            if self.sessions is None:
                raise APIError(401, "Not authenticated. Run 'opsman login' first.")
            headers["Authorization"] = f"Bearer {self.sessions.get_valid_token()}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: dict | None = None,
        files: dict | None = None,
        authenticated: bool = True,
    ) -> requests.Response:
        """Make request to the Ops Manager API.

        Args:
            method: HTTP method.
            endpoint: API path, starting with /api/v0.
            json_data: JSON body data.
            files: Files for multipart upload.
            authenticated: Whether to include the bearer token.

        Returns:
            Response object with a 2xx status.

        Raises:
            APIError: On non-2xx responses or connection issues.
        """
        url = f"{self.base_url}{endpoint}"
        headers = self._get_headers(authenticated)

        # Let requests set the multipart boundary
        if files:
            headers.pop("Content-Type", None)

        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                json=json_data,
                files=files,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.exceptions.SSLError as e:
            raise APIError(0, "SSL certificate verification failed") from e
        except requests.exceptions.ConnectionError as e:
            raise APIError(
                0, f"Cannot connect to Ops Manager at {self.base_url}"
            ) from e
        except requests.exceptions.Timeout as e:
            raise APIError(0, "Request timed out") from e
        except requests.exceptions.RequestException as e:
            raise APIError(0, "Network request failed") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if not 200 <= response.status_code < 300:
            try:
                error_data = response.json() if response.content else {}
            except json.JSONDecodeError:
                error_data = {}
            if not isinstance(error_data, dict):
                error_data = {}
            errors = error_data.get("errors")
            raise APIError(
                response.status_code,
                _error_message(error_data) or response.reason or "Request failed",
                errors if isinstance(errors, dict) else None,
            )
        return response

    @staticmethod
    def _safe_json(resp: requests.Response) -> Any:
        """Parse JSON from response, raising APIError on failure."""
        try:
            return resp.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise APIError(
                resp.status_code,
                "Unexpected response from Ops Manager.",
            ) from e

    # ==================== UNLOCK ====================

    def unlock(self, passphrase: str) -> None:
        """Submit the decryption passphrase to unlock the appliance.

        Does not use the bearer-token session.

        Args:
            passphrase: Decryption passphrase.

        Raises:
            WrongPassphraseError: If the appliance answers 403.
            APIError: On any other non-200 outcome.
        """
        try:
            resp = self._request(
                "PUT",
                "/api/v0/unlock",
                json_data={"passphrase": passphrase},
                authenticated=False,
            )
        except APIError as e:
            if e.status_code == 403:
                raise WrongPassphraseError(details=e.details) from e
            raise
        if resp.status_code != 200:
            raise APIError(resp.status_code, "Unexpected response while unlocking")

    # ==================== UPLOADS ====================

    @staticmethod
    def check_artifact(path: str) -> None:
        """Make sure ``path`` is a readable regular file.

        Raises:
            InvalidInputError: If it is missing, not a file, or unreadable.
        """
        file_path = Path(path)
        if not file_path.exists():
            raise InvalidInputError(f"File not found: {path}")
        if not file_path.is_file():
            raise InvalidInputError(f"Not a regular file: {path}")
        if not os.access(file_path, os.R_OK):
            raise InvalidInputError(f"File is not readable: {path}")

    def upload_artifact(self, path: str) -> UploadTarget:
        """Upload a stemcell or product tile.

        The endpoint is chosen from the file name.

        Args:
            path: Local path of the artifact.

        Returns:
            The target the file was uploaded to.

        Raises:
            InvalidInputError: If the file cannot be read. No request is made.
            APIError: If the upload is rejected.
        """
        self.check_artifact(path)
        target = classify_artifact(path)
        logger.info("Uploading %s as %s", path, target.label)
        with open(path, "rb") as f:
            self._request(
                "POST",
                target.endpoint,
                files={
                    target.field_name: (
                        os.path.basename(path),
                        f,
                        "application/octet-stream",
                    )
                },
            )
        return target

    def upload_artifacts(
        self,
        paths: Iterable[str],
        on_start: UploadCallback | None = None,
        on_done: UploadCallback | None = None,
    ) -> list[tuple[str, UploadTarget]]:
        """Upload several artifacts in order, stopping at the first failure.

        Every path is checked before the first upload starts. Files uploaded
        before a failure stay uploaded.

        Args:
            paths: Local paths, uploaded in the given order.
            on_start: Called with (path, target) before each upload.
            on_done: Called with (path, target) after each successful upload.

        Returns:
            (path, target) for every uploaded file.
        """
        paths = list(paths)
        for path in paths:
            self.check_artifact(path)
        # Any login prompt happens before progress output starts
        if paths and self.sessions is not None:
            self.sessions.get_valid_token()

        uploaded: list[tuple[str, UploadTarget]] = []
        for path in paths:
            if on_start:
                on_start(path, classify_artifact(path))
            target = self.upload_artifact(path)
            uploaded.append((path, target))
            if on_done:
                on_done(path, target)
        return uploaded

    # ==================== VM TYPES ====================

    def list_vm_types(self) -> list[dict[str, Any]]:
        """List the configured VM types.

        Returns:
            VM types as returned by the server, in server order.
        """
        resp = self._request("GET", "/api/v0/vm_types")
        data = self._safe_json(resp)
        if not isinstance(data, dict):
            raise APIError(resp.status_code, "Unexpected response from Ops Manager.")
        return cast(list[dict[str, Any]], data.get("vm_types") or [])

    def replace_vm_types(self, vm_types: list[dict[str, Any]]) -> None:
        """Replace the whole VM type collection.

        Args:
            vm_types: New collection.
        """
        self._request("PUT", "/api/v0/vm_types", json_data={"vm_types": vm_types})

    def delete_vm_types(self) -> None:
        """Delete the custom VM types."""
        self._request("DELETE", "/api/v0/vm_types")

    def upsert_vm_type(
        self, name: str, cpu: int, ram: int, ephemeral_disk: int
    ) -> list[dict[str, Any]]:
        """Create or update one VM type, leaving the others untouched.

        Args:
            name: VM type name.
            cpu: Number of CPUs.
            ram: Memory in MB.
            ephemeral_disk: Ephemeral disk in MB.

        Returns:
            The collection that was sent to the server.
        """
        try:
            vm_type = VmType(
                name=name, cpu=cpu, ram=ram, ephemeral_disk=ephemeral_disk
            )
        except ValidationError as e:
            detail = e.errors()[0]
            field = ".".join(str(p) for p in detail["loc"])
            raise InvalidInputError(f"Invalid {field}: {detail['msg']}") from e
        current = self.list_vm_types()
        merged = merge_vm_type(current, vm_type)
        logger.info(
            "%s VM type %s",
            "Updating" if len(merged) == len(current) else "Adding",
            name,
        )
        self.replace_vm_types(merged)
        return merged


def _error_message(error_data: dict[str, Any]) -> str | None:
    """Flatten Ops Manager's error payloads into one line."""
    errors = error_data.get("errors")
    if isinstance(errors, dict):
        parts = []
        for key, value in errors.items():
            if isinstance(value, list):
                value = ", ".join(str(v) for v in value)
            parts.append(f"{key}: {value}")
        if parts:
            return "; ".join(parts)
    elif isinstance(errors, list) and errors:
        return "; ".join(str(e) for e in errors)
    message = error_data.get("message") or error_data.get("error")
    if message and not isinstance(message, str):
        message = json.dumps(message)
    return message
