from abc import ABC, abstractmethod


class BaseVisionClient(ABC):
    """Contract for provider-specific multimodal model clients."""

    @abstractmethod
    def generate(
        self,
        *,
        model: str,
        instruction: str,
        image_bytes: bytes,
        media_type: str,
    ) -> str | None:
        """Return the first candidate's text, or None when the response has no usable text."""
