class AnalysisError(Exception):
    """Base exception for issue analysis errors."""


class InvalidRequestError(AnalysisError):
    """Raised when the submitted image is missing or malformed."""
