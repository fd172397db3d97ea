from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from civicly.analysis.analyzer import IssueAnalyzer, build_analyzer
from civicly.analysis.exceptions import InvalidRequestError
from civicly.analysis.models import UploadedImage
from civicly.api.errors import error_response
from civicly.api.schemas import AnalyzeResponse, ReportItem, ReportsResponse, SummaryItem
from civicly.config.settings import Settings
from civicly.ledger.dashboard import summarize_reports
from civicly.ledger.exceptions import LedgerNotConfiguredError
from civicly.ledger.report_ledger import ReportLedger
from civicly.logging.logger import Log

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def create_app(
    settings: Settings,
    analyzer: IssueAnalyzer | None = None,
    ledger: ReportLedger | None = None,
) -> FastAPI:
    """Build the HTTP application. Collaborators default to the configured ones."""
    if analyzer is None:
        analyzer = build_analyzer(settings)
    if ledger is None and settings.ledger_rpc_url and settings.ledger_contract_address:
        ledger = ReportLedger.from_settings(settings)

    app = FastAPI(title="Civicly issue analysis")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(_request: Request, exc: RequestValidationError) -> JSONResponse:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
        Log.warning(f"Rejected malformed request: {fields}")
        message = f"Malformed request field(s): {', '.join(fields)}"
        return error_response(InvalidRequestError(message))

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/analyze")
    def analyze(image: list[UploadFile] | None = File(None)) -> JSONResponse:
        try:
            uploaded = _read_upload(image, settings.max_image_bytes)
            result = analyzer.analyze(uploaded)
        except Exception as exc:
            return error_response(exc)
        body = AnalyzeResponse.from_result(result)
        return JSONResponse(content=body.model_dump(by_alias=True))

    @app.get("/reports")
    def reports() -> JSONResponse:
        try:
            if ledger is None:
                raise LedgerNotConfiguredError("Report ledger is not configured")
            records = ledger.list_reports()
        except Exception as exc:
            Log.error(f"Reading reports failed: {exc}")
            return error_response(exc)
        body = ReportsResponse(
            reports=[ReportItem.from_record(record) for record in records],
            summary=SummaryItem.from_summary(summarize_reports(records)),
        )
        return JSONResponse(content=body.model_dump(by_alias=True))

    return app


def _read_upload(uploads: list[UploadFile] | None, max_bytes: int) -> UploadedImage | None:
    """Read the single uploaded image, at most max_bytes + 1 bytes of it.

    Reading one byte past the limit is enough for the size check to reject it.
    """
    if not uploads:
        return None
    if len(uploads) > 1:
        raise InvalidRequestError("Exactly one image must be uploaded")
    upload = uploads[0]
    return UploadedImage(
        content=upload.file.read(max_bytes + 1),
        media_type=upload.content_type or DEFAULT_MEDIA_TYPE,
        filename=upload.filename or "upload",
    )
