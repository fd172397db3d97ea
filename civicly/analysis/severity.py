from civicly.classification.labels import IssueLabel

MIN_SEVERITY = 1

SEVERITY_BY_LABEL: dict[str, int] = {
    IssueLabel.POTHOLE.value: 7,
    IssueLabel.GARBAGE.value: 5,
    IssueLabel.WATER_LEAK.value: 6,
    IssueLabel.BROKEN_LIGHT.value: 3,
}


def severity_for(label: IssueLabel | str) -> int:
    """Return the severity score for a label; unlisted labels score MIN_SEVERITY."""
    key = label.value if isinstance(label, IssueLabel) else label
    return SEVERITY_BY_LABEL.get(key, MIN_SEVERITY)
