"""Example vision client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in ClassifierFactory.
"""

from civicly.classification.client_base import BaseVisionClient


class ExampleClientAdapter(BaseVisionClient):
    """Example adapter that always answers with a fixed label.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE = "other"

    def __init__(self, response: str | None = DEFAULT_RESPONSE) -> None:
        self._response = response

    def generate(
        self,
        *,
        model: str,
        instruction: str,
        image_bytes: bytes,
        media_type: str,
    ) -> str | None:
        _ = model, instruction, image_bytes, media_type
        return self._response
