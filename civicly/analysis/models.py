from dataclasses import dataclass

from civicly.classification.labels import IssueLabel


@dataclass(frozen=True)
class UploadedImage:
    """Image submitted for one analysis request."""

    content: bytes
    media_type: str
    filename: str


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of a completed analysis."""

    label: IssueLabel
    severity: int
    content_id: str
    verification_hash: str
