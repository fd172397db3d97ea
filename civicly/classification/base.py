from abc import ABC, abstractmethod

from civicly.classification.labels import IssueLabel


class BaseClassifier(ABC):
    """Contract for all issue classifiers."""

    @abstractmethod
    def classify(self, image_bytes: bytes, media_type: str) -> IssueLabel:
        """Assign exactly one issue label to an image.

        Args:
            image_bytes: Raw image content.
            media_type: Declared media type, e.g. "image/jpeg".

        Returns:
            The parsed label; IssueLabel.UNKNOWN when the model answer is
            missing or outside the vocabulary.

        Raises:
            ClassificationUnavailableError: when the model endpoint cannot be used.
        """
