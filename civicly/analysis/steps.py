from civicly.analysis.exceptions import InvalidRequestError
from civicly.analysis.pipeline import AnalysisContext, AnalysisStep
from civicly.analysis.severity import severity_for
from civicly.analysis.verification import build_verification_hash
from civicly.classification.base import BaseClassifier
from civicly.logging.logger import Log
from civicly.pinning.base import BasePinningClient


class ValidateImageStep(AnalysisStep):
    def __init__(self, max_image_bytes: int) -> None:
        self._max_image_bytes = max_image_bytes

    def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.image is None:
            raise InvalidRequestError("No file uploaded")
        size = len(context.image.content)
        if size == 0:
            raise InvalidRequestError("Uploaded file is empty")
        if size > self._max_image_bytes:
            raise InvalidRequestError(
                f"Uploaded file is too large (max {self._max_image_bytes} bytes)"
            )
        return context


class PinImageStep(AnalysisStep):
    def __init__(self, pinning_client: BasePinningClient) -> None:
        self._pinning_client = pinning_client

    def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.image is None:
            raise ValueError("AnalysisContext.image must be set before pinning")
        image = context.image
        context.content_id = self._pinning_client.pin(
            image.content,
            image.filename,
            image.media_type,
        )
        Log.info(
            f"Pinned {len(image.content)} bytes of '{image.filename}' as {context.content_id}"
        )
        return context


class ClassifyImageStep(AnalysisStep):
    def __init__(self, classifier: BaseClassifier) -> None:
        self._classifier = classifier

    def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.image is None:
            raise ValueError("AnalysisContext.image must be set before classification")
        context.label = self._classifier.classify(
            context.image.content,
            context.image.media_type,
        )
        Log.info(f"Classified '{context.image.filename}' as {context.label.value}")
        return context


class ScoreSeverityStep(AnalysisStep):
    def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.label is None:
            raise ValueError("AnalysisContext.label must be set before scoring")
        context.severity = severity_for(context.label)
        return context


class BuildVerificationHashStep(AnalysisStep):
    def run(self, context: AnalysisContext) -> AnalysisContext:
        if context.label is None or context.severity is None or not context.content_id:
            raise ValueError(
                "AnalysisContext.label, severity and content_id must be set before hashing"
            )
        context.verification_hash = build_verification_hash(
            context.label,
            context.severity,
            context.content_id,
        )
        return context
