"""Domain exceptions for debts app."""


class DebtServiceError(Exception):
    """Base exception for all debt service errors."""
    pass


class DebtNotFoundError(DebtServiceError):
    """Debt does not exist."""
    pass


class InvalidDebtAmountsError(DebtServiceError):
    """Total, paid and remaining amounts do not add up."""
    pass
