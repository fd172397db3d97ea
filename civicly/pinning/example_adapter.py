"""Example pinning adapter.

Use this module as a reference when implementing new pinning providers.
Implement BasePinningClient and register the provider in PinningClientFactory.
"""

import hashlib

from civicly.pinning.base import BasePinningClient


class ExamplePinningAdapter(BasePinningClient):
    """Example adapter that derives a fake identifier from the content digest.

    No network calls. Useful for local development and tests.
    """

    PREFIX = "example-"

    def pin(self, content: bytes, name: str, media_type: str = "") -> str:
        _ = name, media_type
        return self.PREFIX + hashlib.sha256(content).hexdigest()[:46]
