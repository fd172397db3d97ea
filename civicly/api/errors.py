from fastapi.responses import JSONResponse

from civicly.analysis.exceptions import InvalidRequestError
from civicly.api.schemas import ErrorResponse
from civicly.classification.exceptions import ClassificationUnavailableError
from civicly.ledger.exceptions import LedgerNotConfiguredError, LedgerUnavailableError
from civicly.pinning.exceptions import StorageRejectedError, StorageUnavailableError

ERROR_KINDS: tuple[tuple[type[Exception], int, str], ...] = (
    (InvalidRequestError, 400, "invalid_request"),
    (StorageUnavailableError, 500, "storage_unavailable"),
    (StorageRejectedError, 500, "storage_rejected"),
    (ClassificationUnavailableError, 500, "classification_unavailable"),
    (LedgerNotConfiguredError, 503, "ledger_not_configured"),
    (LedgerUnavailableError, 502, "ledger_unavailable"),
)


def classify_error(exc: Exception) -> tuple[int, str]:
    """Return (HTTP status, stable kind) for an exception."""
    for exc_type, status, kind in ERROR_KINDS:
        if isinstance(exc, exc_type):
            return status, kind
    return 500, "internal"


def error_response(exc: Exception) -> JSONResponse:
    status, kind = classify_error(exc)
    body = ErrorResponse(error=str(exc) or exc.__class__.__name__, kind=kind)
    return JSONResponse(status_code=status, content=body.model_dump(by_alias=True))
