"""
Domain exceptions for expenses app.

These exceptions represent business rule violations raised by the
expenses services layer. Views catch them and convert them to HTTP
responses.

Exception Hierarchy:
    ExpensesServiceError (base)
    ├── NoOutstandingBalanceError
    ├── InvalidAmountError
    ├── ExpenseNotFoundError
    └── InsufficientPermissionsError

An empty room is not an error: balances for it are simply all zero.
"""


class ExpensesServiceError(Exception):
    """Base exception for all expenses service errors."""
    pass


class NoOutstandingBalanceError(ExpensesServiceError):
    """
    Raised when settle-up is requested but the owed amount is within the
    settle-up tolerance.
    """
    pass


class InvalidAmountError(ExpensesServiceError):
    """Raised when an amount is NaN, infinite or negative."""
    pass


class ExpenseNotFoundError(ExpensesServiceError):
    """Raised when an expense does not exist in the user's room."""
    pass


class InsufficientPermissionsError(ExpensesServiceError):
    """Raised when a user lacks the rights for a ledger operation."""
    pass
