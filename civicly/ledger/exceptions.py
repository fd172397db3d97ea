class LedgerError(Exception):
    """Base exception for on-chain report reads."""


class LedgerNotConfiguredError(LedgerError):
    """Raised when no RPC endpoint or contract address is configured."""


class LedgerUnavailableError(LedgerError):
    """Raised when the RPC node or the contract call fails."""
