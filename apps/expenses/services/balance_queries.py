"""
Balance queries for a room.

Every function re-reads the room's members, expenses and settlements, so
results always reflect what is in the database at call time.
"""

from typing import Dict

from django.conf import settings

from apps.expenses.models import Expense, Settlement
from apps.rooms.models import Room
from apps.rooms.services import get_room_members

from .reconciliation import compute_balances, balance_for, chart_data


def get_room_snapshot(*, room: Room) -> Dict:
    """
    Fetch everything the reconciliation engine needs for ``room``.

    Returns:
        dict: A dictionary containing:
            - room_id (UUID): The room's id.
            - members (list[tuple]): ``(user_id, display_name)`` in join order.
            - expenses (list[tuple]): ``(added_by_id, amount)`` pairs.
            - settlements (list[tuple]): ``(paid_by_id, amount)`` pairs.
    """
    members = [
        (membership.user_id, membership.user.get_display_name())
        for membership in get_room_members(room=room)
    ]
    expenses = list(
        Expense.objects.filter(room=room).values_list('added_by_id', 'amount')
    )
    settlements = list(
        Settlement.objects.filter(room=room).values_list('paid_by_id', 'amount')
    )
    return {
        'room_id': room.id,
        'members': members,
        'expenses': expenses,
        'settlements': settlements,
    }


def compute_room_balances(snapshot: Dict) -> Dict:
    """Run the reconciliation engine over a snapshot."""
    return compute_balances(
        [member_id for member_id, _ in snapshot['members']],
        snapshot['expenses'],
        snapshot['settlements'],
    )


def get_split_summary(*, room: Room) -> Dict:
    """
    Total, per-head share and every member's balance.

    Returns:
        dict: A dictionary containing:
            - total (Decimal): Sum of all expenses.
            - per_head (Decimal): Fair share per member.
            - balances (list[dict]): One row per member with ``user_id``,
              ``name`` and ``owes`` (positive = owes the group).
    """
    snapshot = get_room_snapshot(room=room)
    balances = compute_room_balances(snapshot)

    return {
        'total': balances['total'],
        'per_head': balances['per_head'],
        'balances': [
            {
                'user_id': member_id,
                'name': name,
                'owes': balance_for(balances, member_id),
            }
            for member_id, name in snapshot['members']
        ],
    }


def get_chart_data(*, room: Room) -> Dict:
    """Display name -> effective contribution, small values hidden."""
    snapshot = get_room_snapshot(room=room)
    balances = compute_room_balances(snapshot)
    return chart_data(balances, snapshot['members'], settings.CHART_DISPLAY_THRESHOLD)
