from abc import ABC, abstractmethod
from dataclasses import dataclass

from civicly.analysis.models import UploadedImage
from civicly.classification.labels import IssueLabel


@dataclass(slots=True)
class AnalysisContext:
    image: UploadedImage | None
    content_id: str = ""
    label: IssueLabel | None = None
    severity: int | None = None
    verification_hash: str = ""


class AnalysisStep(ABC):
    @abstractmethod
    def run(self, context: AnalysisContext) -> AnalysisContext:
        raise NotImplementedError
