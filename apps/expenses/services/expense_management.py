"""
Expense management service.

Adds and removes expenses and clears a room's ledger. Amounts are checked
here as well as in the serializers so that callers outside the API cannot
put NaN, infinite or negative values into the ledger.
"""

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.expenses.models import Expense, Settlement
from apps.rooms.models import Room

from .exceptions import (
    InvalidAmountError,
    ExpenseNotFoundError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


def validate_amount(amount) -> Decimal:
    """
    Convert ``amount`` to a Decimal rounded to the minor currency unit.

    Raises:
        InvalidAmountError: If amount is not a number, NaN, infinite or negative
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmountError(f"Invalid amount: {amount!r}")

    if not value.is_finite():
        raise InvalidAmountError("Amount must be a finite number")
    if value < 0:
        raise InvalidAmountError("Amount cannot be negative")

    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@transaction.atomic
def add_expense(*, room: Room, user: User, description: str, amount) -> Expense:
    """
    Record money ``user`` put into the room's pool.

    Args:
        room: The user's room
        user: Member who paid
        description: What the money was spent on
        amount: Non-negative amount, rounded to the minor unit

    Returns:
        Created Expense instance

    Raises:
        InvalidAmountError: If amount is non-finite or negative
    """
    amount = validate_amount(amount)

    expense = Expense.objects.create(
        room=room,
        description=description,
        amount=amount,
        added_by=user,
    )

    log_activity(
        room=room,
        user=user,
        description=(
            f"{user.get_display_name()} added an expense: {description} "
            f"for {settings.CURRENCY_SYMBOL}{amount:.2f}"
        ),
        category=ActivityType.EXPENSE,
    )
    logger.info("Expense %s of %s added to room %s", expense.id, amount, room.id)
    return expense


def list_expenses(*, room: Room) -> QuerySet[Expense]:
    """Room expenses, newest first, payer joined in."""
    return (
        Expense.objects
        .filter(room=room)
        .select_related('added_by')
        .order_by('-created_at')
    )


@transaction.atomic
def delete_expense(*, expense_id: UUID, room: Room, user: User) -> None:
    """
    Delete a single expense.

    Only the room owner or the member who added the expense may delete it.

    Raises:
        ExpenseNotFoundError: If the expense is not in ``room``
        InsufficientPermissionsError: If user is neither owner nor payer
    """
    try:
        expense = (
            Expense.objects
            .select_for_update()
            .get(id=expense_id, room=room)
        )
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError("Expense not found.")

    if room.owner_id != user.id and expense.added_by_id != user.id:
        raise InsufficientPermissionsError("Not authorized to delete this expense.")

    expense.delete()
    logger.info("Expense %s deleted from room %s by %s", expense_id, room.id, user.id)


@transaction.atomic
def clear_room_ledger(*, room: Room, user: User) -> Dict[str, int]:
    """
    Delete every expense and settlement of the room (owner only).

    Both deletes run in one transaction with the room row locked, so no
    settle-up can read a ledger that is half gone.

    Returns:
        dict: ``{'expenses': n, 'settlements': m}`` deleted counts

    Raises:
        InsufficientPermissionsError: If user does not own the room
    """
    locked_room = Room.objects.select_for_update().get(id=room.id)
    if locked_room.owner_id != user.id:
        raise InsufficientPermissionsError("Not authorized")

    expenses_deleted, _ = Expense.objects.filter(room=locked_room).delete()
    settlements_deleted, _ = Settlement.objects.filter(room=locked_room).delete()

    logger.info(
        "Ledger of room %s cleared: %d expenses, %d settlements",
        room.id,
        expenses_deleted,
        settlements_deleted,
    )
    return {'expenses': expenses_deleted, 'settlements': settlements_deleted}
