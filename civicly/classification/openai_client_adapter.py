import base64

import httpx
import openai

from civicly.classification.client_base import BaseVisionClient
from civicly.classification.exceptions import ClassificationUnavailableError


class OpenAIClientAdapter(BaseVisionClient):
    """Vision client built on the OpenAI-compatible chat API with image input."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate(
        self,
        *,
        model: str,
        instruction: str,
        image_bytes: bytes,
        media_type: str,
    ) -> str | None:
        data_url = (
            f"data:{media_type};base64,"
            f"{base64.b64encode(image_bytes).decode('ascii')}"
        )
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=0.0,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": instruction},
                            {"type": "image_url", "image_url": {"url": data_url}},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ClassificationUnavailableError(
                f"Vision model network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ClassificationUnavailableError(
                f"Vision model API error: {exc}"
            ) from exc

        if not response.choices:
            return None
        content = response.choices[0].message.content
        if not isinstance(content, str):
            return None
        return content.strip()
