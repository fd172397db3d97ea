import pytest

from civicly.classification.labels import IssueLabel, parse_label


class TestParseLabel:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("pothole", IssueLabel.POTHOLE),
            ("garbage", IssueLabel.GARBAGE),
            ("broken_light", IssueLabel.BROKEN_LIGHT),
            ("water_leak", IssueLabel.WATER_LEAK),
            ("other", IssueLabel.OTHER),
        ],
    )
    def test_parses_known_labels(self, raw: str, expected: IssueLabel) -> None:
        assert parse_label(raw) is expected

    def test_trims_whitespace(self) -> None:
        assert parse_label("  pothole\n") is IssueLabel.POTHOLE

    def test_is_case_insensitive(self) -> None:
        assert parse_label("Water_Leak") is IssueLabel.WATER_LEAK

    @pytest.mark.parametrize("raw", [None, "", "   ", "a pothole", "unknown", "flood"])
    def test_falls_back_to_unknown(self, raw: str | None) -> None:
        assert parse_label(raw) is IssueLabel.UNKNOWN
