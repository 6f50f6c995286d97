"""Domain exceptions for finances app."""


class FinanceServiceError(Exception):
    """Base exception for all finance service errors."""
    pass


class UnsupportedCurrencyError(FinanceServiceError):
    """Currency is not one of the ledger currencies."""
    pass
