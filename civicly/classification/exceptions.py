class ClassificationError(Exception):
    """Raised when image classification fails."""


class ClassificationUnavailableError(ClassificationError):
    """Raised when the vision model endpoint fails due to network, timeout or auth issues."""
