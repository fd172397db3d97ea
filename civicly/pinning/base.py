from abc import ABC, abstractmethod


class BasePinningClient(ABC):
    """Contract for all content pinning adapters."""

    @abstractmethod
    def pin(self, content: bytes, name: str, media_type: str = "") -> str:
        """Upload bytes to the content-addressable network.

        Args:
            content: Raw file content.
            name: Display name recorded with the pin.
            media_type: Declared media type of the content, if known.

        Returns:
            The content identifier (CID) addressing the uploaded bytes.

        Raises:
            StorageUnavailableError: on network, timeout or auth failure.
            StorageRejectedError: when the provider refuses the content.
        """
