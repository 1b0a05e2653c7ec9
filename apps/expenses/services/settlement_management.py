"""
Settlement management service.

Settle-up pays off whatever a member still owes against the room's
per-head share.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from uuid import UUID

from django.conf import settings
from django.db import transaction

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.expenses.models import Settlement
from apps.rooms.models import Room, RoomMembership
from apps.rooms.services.exceptions import NotInRoomError

from .balance_queries import get_room_snapshot, compute_room_balances
from .exceptions import NoOutstandingBalanceError
from .reconciliation import amount_owed

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


@transaction.atomic
def settle_up(*, room_id: UUID, user: User) -> Settlement:
    """
    Create a settlement covering everything ``user`` owes the room.

    The room row is locked before the history is read, so two settle-ups
    in the same room run one after the other and the second sees the
    first's settlement.

    Algorithm:
        1. Lock the room, confirm membership and re-read members,
           expenses and settlements
        2. ``owed = per_head - (own expenses + own settlements)``
        3. Reject when ``owed <= SETTLE_UP_TOLERANCE``
        4. Store a settlement for ``owed`` rounded to the minor unit
        5. Log one activity with the amount

    Args:
        room_id: Id of the user's room
        user: Member settling up

    Returns:
        Created Settlement instance

    Raises:
        NotInRoomError: If user is not a member of the room
        NoOutstandingBalanceError: If owed amount is within the tolerance
    """
    locked_room = Room.objects.select_for_update().get(id=room_id)

    # Membership is checked under the lock so a removed member cannot pay in
    if not RoomMembership.objects.filter(room=locked_room, user=user).exists():
        raise NotInRoomError("You are not a member of this room.")

    snapshot = get_room_snapshot(room=locked_room)
    balances = compute_room_balances(snapshot)
    owed = amount_owed(
        user.id,
        balances['per_head'],
        snapshot['expenses'],
        snapshot['settlements'],
    )

    if owed <= settings.SETTLE_UP_TOLERANCE:
        raise NoOutstandingBalanceError(
            "You do not have an outstanding balance to settle."
        )

    amount = owed.quantize(CENT, rounding=ROUND_HALF_UP)
    settlement = Settlement.objects.create(
        room=locked_room,
        paid_by=user,
        amount=amount,
    )

    log_activity(
        room=locked_room,
        user=user,
        description=(
            f"{user.get_display_name()} settled their expenses for "
            f"{settings.CURRENCY_SYMBOL}{amount:.2f}"
        ),
        category=ActivityType.EXPENSE,
    )
    logger.info("Settlement %s of %s in room %s by %s", settlement.id, amount, room_id, user.id)
    return settlement
