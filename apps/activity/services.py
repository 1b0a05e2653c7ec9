"""
Activity Services Module
=========================

Records what happens in a room and pushes it to the room's live channel.

Functions:
    log_activity: Persist an activity and broadcast it once committed.
    list_activities: Room feed, newest first.
    clear_activities: Owner-only wipe of the feed.

Example:
    Logging a settle-up::

        from apps.activity.services import log_activity
        from apps.activity.models import ActivityType

        log_activity(
            room=room,
            user=request.user,
            description='Asha settled their expenses for ₹120.00',
            category=ActivityType.EXPENSE,
        )
"""

import logging

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.rooms.models import Room

from .broadcast import ACTIVITY_EVENT, broadcast_to_room
from .exceptions import NotRoomOwnerError
from .models import Activity

logger = logging.getLogger(__name__)


def log_activity(*, room: Room, user: User, description: str, category: str) -> Activity:
    """
    Record an activity for ``room`` and broadcast it to the room channel.

    The broadcast is deferred with ``transaction.on_commit`` so listeners
    never hear about an activity that was rolled back. Outside a transaction
    it is sent immediately.

    Args:
        room: Room the activity belongs to
        user: Member who performed the action
        description: Human readable text shown in the feed
        category: One of ``ActivityType``

    Returns:
        Created Activity instance
    """
    activity = Activity.objects.create(
        room=room,
        user=user,
        description=description,
        type=category,
    )

    payload = {
        'description': description,
        'type': category,
        'user_name': user.get_display_name(),
        'timestamp': activity.created_at.isoformat(),
    }
    transaction.on_commit(lambda: broadcast_to_room(room.id, ACTIVITY_EVENT, payload))

    logger.debug("Activity logged for room %s: %s", room.id, description)
    return activity


def list_activities(*, room: Room) -> QuerySet[Activity]:
    """Return the room's feed, newest first, with users joined in."""
    return (
        Activity.objects
        .filter(room=room)
        .select_related('user')
        .order_by('-created_at')
    )


@transaction.atomic
def clear_activities(*, room: Room, user: User) -> int:
    """
    Delete every activity in the room.

    Raises:
        NotRoomOwnerError: If user does not own the room

    Returns:
        Number of deleted activities
    """
    if room.owner_id != user.id:
        raise NotRoomOwnerError("Only the room owner can clear activities")

    deleted, _ = Activity.objects.filter(room=room).delete()
    logger.info("Cleared %d activities for room %s", deleted, room.id)
    return deleted
