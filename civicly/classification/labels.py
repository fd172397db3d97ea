"""Closed vocabulary of issue labels and parsing of raw model output."""

from enum import Enum


class IssueLabel(str, Enum):
    POTHOLE = "pothole"
    GARBAGE = "garbage"
    BROKEN_LIGHT = "broken_light"
    WATER_LEAK = "water_leak"
    OTHER = "other"
    UNKNOWN = "unknown"


_KNOWN_LABELS: dict[str, IssueLabel] = {
    label.value: label for label in IssueLabel if label is not IssueLabel.UNKNOWN
}


def parse_label(raw: str | None) -> IssueLabel:
    """Map raw model output to an IssueLabel.

    Total over every input: a missing response, an empty string, or text
    outside the vocabulary all become IssueLabel.UNKNOWN.
    """
    if not isinstance(raw, str):
        return IssueLabel.UNKNOWN
    return _KNOWN_LABELS.get(raw.strip().lower(), IssueLabel.UNKNOWN)
