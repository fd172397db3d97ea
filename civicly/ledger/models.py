from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReportRecord:
    """One issue report as stored by the IssueReport contract."""

    id: int
    reporter: str
    image_hash: str
    issue_type: str
    base_severity: int
    adjusted_severity: int
    location: str
    timestamp: int
    ai_hash: str  # lowercase hex without 0x, empty when not yet submitted
    ai_verified: bool


@dataclass(frozen=True)
class DashboardSummary:
    """Aggregates shown on the reports dashboard."""

    total: int = 0
    critical: int = 0
    verified: int = 0
    hash_consistent: int = 0
    by_issue_type: dict[str, int] = field(default_factory=dict)
