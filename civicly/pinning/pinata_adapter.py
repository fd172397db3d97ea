import json
import time

import httpx

from civicly.logging.logger import Log
from civicly.pinning.base import BasePinningClient
from civicly.pinning.exceptions import (
    StorageAuthError,
    StorageRejectedError,
    StorageUnavailableError,
)

_AUTH_FAILURE_STATUSES = frozenset({401, 403})


class PinataAdapter(BasePinningClient):
    """Pins files to IPFS through the Pinata REST API."""

    PIN_FILE_PATH = "/pinning/pinFileToIPFS"

    def __init__(
        self,
        *,
        api_key: str,
        secret_api_key: str,
        timeout_seconds: int,
        base_url: str = "https://api.pinata.cloud",
        cid_version: int = 1,
        max_attempts: int = 1,
        backoff_seconds: float = 0.5,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._cid_version = cid_version
        self._max_attempts = max(1, max_attempts)
        self._backoff_seconds = max(0.0, backoff_seconds)
        self._client = http_client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
        )
        self._headers = {
            "pinata_api_key": api_key,
            "pinata_secret_api_key": secret_api_key,
        }

    def pin(self, content: bytes, name: str, media_type: str = "") -> str:
        """Pin content, retrying timeouts, transport errors and 5xx with linear backoff."""
        attempt = 1
        while True:
            try:
                return self._pin_once(content, name, media_type)
            except StorageAuthError:
                raise
            except StorageUnavailableError as exc:
                if attempt >= self._max_attempts:
                    raise
                delay = self._backoff_seconds * attempt
                Log.warning(
                    f"Pinning attempt {attempt} failed, retrying in {delay:.1f}s: {exc}"
                )
                time.sleep(delay)
                attempt += 1

    def _pin_once(self, content: bytes, name: str, media_type: str) -> str:
        try:
            response = self._client.post(
                self.PIN_FILE_PATH,
                headers=self._headers,
                files={"file": (name, content, media_type or "application/octet-stream")},
                data={
                    "pinataOptions": json.dumps({"cidVersion": self._cid_version}),
                    "pinataMetadata": json.dumps({"name": name}),
                },
            )
        except httpx.TimeoutException as exc:
            raise StorageUnavailableError(f"Pinning service timed out: {exc}") from exc
        except httpx.TransportError as exc:
            raise StorageUnavailableError(f"Pinning service network error: {exc}") from exc

        self._raise_for_status(response)
        return self._parse_cid(response)

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        status = response.status_code
        if status < 400:
            return
        detail = response.text[:200]
        if status in _AUTH_FAILURE_STATUSES:
            raise StorageAuthError(f"Pinning service rejected credentials ({status})")
        if status >= 500:
            raise StorageUnavailableError(f"Pinning service error ({status}): {detail}")
        raise StorageRejectedError(f"Pinning service refused upload ({status}): {detail}")

    @staticmethod
    def _parse_cid(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError as exc:
            raise StorageRejectedError(f"Invalid pinning response: {exc}") from exc
        cid = payload.get("IpfsHash") if isinstance(payload, dict) else None
        if not cid or not isinstance(cid, str):
            raise StorageRejectedError("Pinning response is missing IpfsHash")
        return cid
