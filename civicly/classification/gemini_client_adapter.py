import base64
from typing import Any

import httpx

from civicly.classification.client_base import BaseVisionClient
from civicly.classification.exceptions import ClassificationUnavailableError


class GeminiClientAdapter(BaseVisionClient):
    """Vision client built on the Gemini generateContent REST API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str = "https://generativelanguage.googleapis.com/v1",
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = http_client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
        )

    def generate(
        self,
        *,
        model: str,
        instruction: str,
        image_bytes: bytes,
        media_type: str,
    ) -> str | None:
        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": instruction},
                        {
                            "inline_data": {
                                "data": base64.b64encode(image_bytes).decode("ascii"),
                                "mime_type": media_type,
                            }
                        },
                    ]
                }
            ]
        }
        try:
            response = self._client.post(
                f"/models/{model}:generateContent",
                params={"key": self._api_key},
                json=payload,
            )
        except httpx.TimeoutException as exc:
            raise ClassificationUnavailableError(f"Vision model timed out: {exc}") from exc
        except httpx.TransportError as exc:
            raise ClassificationUnavailableError(
                f"Vision model network error: {exc}"
            ) from exc

        if response.status_code >= 400:
            raise ClassificationUnavailableError(
                f"Vision model API error ({response.status_code}): {response.text[:200]}"
            )

        try:
            body = response.json()
        except ValueError:
            return None
        return self._first_candidate_text(body)

    @staticmethod
    def _first_candidate_text(body: Any) -> str | None:
        if not isinstance(body, dict):
            return None
        candidates = body.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            return None
        content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
            return None
        text = parts[0].get("text")
        if not isinstance(text, str):
            return None
        return text.strip()
