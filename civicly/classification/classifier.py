"""AI-powered civic issue classifier."""

from pathlib import Path

from civicly.classification.base import BaseClassifier
from civicly.classification.client_base import BaseVisionClient
from civicly.classification.labels import IssueLabel, parse_label
from civicly.classification.prompt_loader import load_instruction
from civicly.logging.logger import Log


class IssueClassifier(BaseClassifier):
    """Classifies an image into one issue label using a multimodal model."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        model: str,
        instruction_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._instruction = load_instruction(instruction_path)

    def classify(self, image_bytes: bytes, media_type: str) -> IssueLabel:
        raw = self._client.generate(
            model=self._model,
            instruction=self._instruction,
            image_bytes=image_bytes,
            media_type=media_type,
        )
        Log.debug(f"Vision model raw response: {raw!r}")

        label = parse_label(raw)
        if label is IssueLabel.UNKNOWN:
            Log.warning(f"Unrecognized classification response {raw!r}, using 'unknown'")
        return label
