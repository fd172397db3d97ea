class PinningError(Exception):
    """Base exception for all content pinning errors."""


class StorageUnavailableError(PinningError):
    """Raised when the pinning service cannot be reached, times out or rejects credentials."""


class StorageRejectedError(PinningError):
    """Raised when the pinning service refuses the content (size, quota, malformed upload)."""


class StorageAuthError(StorageUnavailableError):
    """Raised when the pinning service rejects the configured credentials."""
