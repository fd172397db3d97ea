import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from web3 import Web3
from web3.exceptions import Web3Exception

from civicly.config.settings import Settings
from civicly.ledger.exceptions import (
    LedgerError,
    LedgerNotConfiguredError,
    LedgerUnavailableError,
)
from civicly.ledger.models import ReportRecord
from civicly.logging.logger import Log

_DEFAULT_ABI_PATH = Path(__file__).parent / "abi" / "issue_report.json"


def load_contract_abi(path: Path | None = None) -> list[dict[str, Any]]:
    """Load the IssueReport contract ABI (read functions only)."""
    if path is None:
        path = _DEFAULT_ABI_PATH
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise LedgerError(f"Failed to load contract ABI: {exc}") from exc


class ReportLedger:
    """Read-only access to reports stored by the IssueReport contract."""

    def __init__(self, contract: Any) -> None:
        self._contract = contract

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReportLedger":
        """Connect to the configured RPC node and bind the contract."""
        rpc_url = settings.ledger_rpc_url.strip()
        address = settings.ledger_contract_address.strip()
        if not rpc_url or not address:
            raise LedgerNotConfiguredError(
                "ledger_rpc_url and ledger_contract_address must both be set"
            )
        try:
            checksum_address = Web3.to_checksum_address(address)
        except ValueError as exc:
            raise LedgerNotConfiguredError(f"Invalid contract address '{address}'") from exc
        w3 = Web3(
            Web3.HTTPProvider(
                rpc_url,
                request_kwargs={"timeout": settings.ledger_timeout_seconds},
            )
        )
        contract = w3.eth.contract(address=checksum_address, abi=load_contract_abi())
        return cls(contract)

    def total_reports(self) -> int:
        return int(self._call("totalReports"))

    def get_report(self, report_id: int) -> ReportRecord:
        return self._to_record(report_id, self._call("reports", report_id))

    def list_reports(self) -> list[ReportRecord]:
        """Read every report, oldest first."""
        total = self.total_reports()
        Log.info(f"Reading {total} reports from the ledger")
        return [self.get_report(report_id) for report_id in range(total)]

    def _call(self, function_name: str, *args: Any) -> Any:
        try:
            return getattr(self._contract.functions, function_name)(*args).call()
        # web3 6.x raises JSON-RPC errors as plain ValueError
        except (Web3Exception, ValueError, OSError) as exc:
            raise LedgerUnavailableError(
                f"Contract call {function_name} failed: {exc}"
            ) from exc

    @staticmethod
    def _to_record(report_id: int, raw: Sequence[Any]) -> ReportRecord:
        (
            reporter,
            image_hash,
            issue_type,
            base_severity,
            adjusted_severity,
            location,
            timestamp,
            ai_hash,
            ai_verified,
        ) = raw
        return ReportRecord(
            id=report_id,
            reporter=str(reporter),
            image_hash=str(image_hash),
            issue_type=str(issue_type),
            base_severity=int(base_severity),
            adjusted_severity=int(adjusted_severity),
            location=str(location),
            timestamp=int(timestamp),
            ai_hash=_hash_to_hex(ai_hash),
            ai_verified=bool(ai_verified),
        )


def _hash_to_hex(raw: bytes | str) -> str:
    if isinstance(raw, str):
        text = raw.lower().removeprefix("0x")
    else:
        text = bytes(raw).hex()
    return "" if not text.strip("0") else text
