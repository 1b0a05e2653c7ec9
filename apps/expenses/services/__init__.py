"""
Expenses app services layer.

The reconciliation engine is pure; the other modules fetch room history,
call it and persist the results inside transactions.
"""

from .exceptions import (
    ExpensesServiceError,
    NoOutstandingBalanceError,
    InvalidAmountError,
    ExpenseNotFoundError,
    InsufficientPermissionsError,
)

from .reconciliation import (
    compute_balances,
    balance_for,
    amount_owed,
    chart_data,
)

from .balance_queries import (
    get_room_snapshot,
    get_split_summary,
    get_chart_data,
)

from .expense_management import (
    validate_amount,
    add_expense,
    list_expenses,
    delete_expense,
    clear_room_ledger,
)

from .settlement_management import (
    settle_up,
)


__all__ = [
    # Exceptions
    'ExpensesServiceError',
    'NoOutstandingBalanceError',
    'InvalidAmountError',
    'ExpenseNotFoundError',
    'InsufficientPermissionsError',

    # Reconciliation engine
    'compute_balances',
    'balance_for',
    'amount_owed',
    'chart_data',

    # Balance queries
    'get_room_snapshot',
    'get_split_summary',
    'get_chart_data',

    # Expense management
    'validate_amount',
    'add_expense',
    'list_expenses',
    'delete_expense',
    'clear_room_ledger',

    # Settlements
    'settle_up',
]
