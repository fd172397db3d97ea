from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from civicly.analysis.models import AnalysisResult
from civicly.ledger.models import DashboardSummary, ReportRecord


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeResponse(CamelModel):
    success: bool = True
    issue_type: str
    severity: int
    image_hash: str
    ai_hash: str

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalyzeResponse":
        return cls(
            issue_type=result.label.value,
            severity=result.severity,
            image_hash=result.content_id,
            ai_hash=result.verification_hash,
        )


class ErrorResponse(CamelModel):
    success: bool = False
    error: str
    kind: str


class ReportItem(CamelModel):
    id: int
    reporter: str
    image_hash: str
    issue_type: str
    base_severity: int
    adjusted_severity: int
    location: str
    timestamp: int
    ai_hash: str
    ai_verified: bool

    @classmethod
    def from_record(cls, record: ReportRecord) -> "ReportItem":
        return cls(
            id=record.id,
            reporter=record.reporter,
            image_hash=record.image_hash,
            issue_type=record.issue_type,
            base_severity=record.base_severity,
            adjusted_severity=record.adjusted_severity,
            location=record.location,
            timestamp=record.timestamp,
            ai_hash=record.ai_hash,
            ai_verified=record.ai_verified,
        )


class SummaryItem(CamelModel):
    total: int
    critical: int
    verified: int
    hash_consistent: int
    by_issue_type: dict[str, int]

    @classmethod
    def from_summary(cls, summary: DashboardSummary) -> "SummaryItem":
        return cls(
            total=summary.total,
            critical=summary.critical,
            verified=summary.verified,
            hash_consistent=summary.hash_consistent,
            by_issue_type=summary.by_issue_type,
        )


class ReportsResponse(CamelModel):
    success: bool = True
    reports: list[ReportItem]
    summary: SummaryItem
