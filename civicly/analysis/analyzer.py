import uuid

from civicly.analysis.models import AnalysisResult, UploadedImage
from civicly.analysis.pipeline import AnalysisContext, AnalysisStep
from civicly.analysis.steps import (
    BuildVerificationHashStep,
    ClassifyImageStep,
    PinImageStep,
    ScoreSeverityStep,
    ValidateImageStep,
)
from civicly.classification.factory import ClassifierFactory
from civicly.config.settings import Settings
from civicly.logging.logger import Log
from civicly.pinning.factory import PinningClientFactory


class IssueAnalyzer:
    """Orchestrates the issue analysis pipeline for one uploaded image.

    Pipeline: validate -> pin -> classify -> score severity -> build hash.
    Any step failure aborts the run; no partial result is returned.
    """

    def __init__(self, steps: list[AnalysisStep]) -> None:
        self._steps = steps

    def analyze(self, image: UploadedImage | None) -> AnalysisResult:
        """Run every step in order and return the combined result."""
        context = AnalysisContext(image=image)
        name = image.filename if image is not None else "<missing>"
        with Log.request(uuid.uuid4().hex[:12]):
            Log.info(f"Analyzing image {name}")
            try:
                for step in self._steps:
                    context = step.run(context)
            except Exception as exc:
                Log.error(f"Analysis of {name} failed: {exc}")
                raise
            return self._build_result(context)

    @staticmethod
    def _build_result(context: AnalysisContext) -> AnalysisResult:
        if context.label is None or context.severity is None:
            raise ValueError("Analysis pipeline finished without a label and severity")
        if not context.content_id or not context.verification_hash:
            raise ValueError("Analysis pipeline finished without a content id and hash")
        return AnalysisResult(
            label=context.label,
            severity=context.severity,
            content_id=context.content_id,
            verification_hash=context.verification_hash,
        )


def build_analyzer(settings: Settings) -> IssueAnalyzer:
    """Build an IssueAnalyzer with the configured pinning and classification adapters."""
    pinning_client = PinningClientFactory.create(settings)
    classifier = ClassifierFactory.create(settings)
    steps: list[AnalysisStep] = [
        ValidateImageStep(settings.max_image_bytes),
        PinImageStep(pinning_client),
        ClassifyImageStep(classifier),
        ScoreSeverityStep(),
        BuildVerificationHashStep(),
    ]
    return IssueAnalyzer(steps)
