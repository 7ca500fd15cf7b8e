"""Exception hierarchy for the ledger build."""


class LedgerError(Exception):
    """Base exception for ledger errors."""

    pass


class ConfigError(LedgerError):
    """Raised when an environment setting cannot be used."""

    pass


class SinkError(LedgerError):
    """Raised when the output artifacts cannot be written."""

    pass
