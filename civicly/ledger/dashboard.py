from collections import Counter
from collections.abc import Iterable

from civicly.analysis.verification import matches_verification_hash
from civicly.ledger.models import DashboardSummary, ReportRecord

CRITICAL_SEVERITY = 7


def summarize_reports(reports: Iterable[ReportRecord]) -> DashboardSummary:
    """Aggregate report counts for the dashboard.

    A report counts as hash-consistent when its stored AI hash equals the hash
    recomputed from its issue type, base severity and image CID.
    """
    total = critical = verified = hash_consistent = 0
    by_issue_type: Counter[str] = Counter()
    for report in reports:
        total += 1
        by_issue_type[report.issue_type] += 1
        if report.adjusted_severity >= CRITICAL_SEVERITY:
            critical += 1
        if report.ai_verified:
            verified += 1
        if report.ai_hash and matches_verification_hash(
            report.ai_hash,
            report.issue_type,
            report.base_severity,
            report.image_hash,
        ):
            hash_consistent += 1
    return DashboardSummary(
        total=total,
        critical=critical,
        verified=verified,
        hash_consistent=hash_consistent,
        by_issue_type=dict(by_issue_type),
    )
