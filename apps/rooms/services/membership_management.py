"""
Membership management service.

Handles joining and leaving rooms with concurrency protection, and the
room lookup every other app goes through.
"""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.rooms.models import Room, RoomMembership

from .exceptions import (
    RoomNotFoundError,
    NotInRoomError,
    AlreadyInRoomError,
    RoomFullError,
    NotRoomOwnerError,
    CannotRemoveSelfError,
    NotMemberError,
)

logger = logging.getLogger(__name__)


def get_room_for_user(*, user: User) -> Room:
    """
    Return the room ``user`` currently belongs to.

    Raises:
        NotInRoomError: If the user is not a member of any room
    """
    try:
        return (
            Room.objects
            .select_related('owner')
            .get(memberships__user=user)
        )
    except Room.DoesNotExist:
        raise NotInRoomError("You are not in a room.")


def get_room_members(*, room: Room) -> QuerySet[RoomMembership]:
    """Memberships of ``room`` in join order, users joined in."""
    return (
        RoomMembership.objects
        .filter(room=room)
        .select_related('user')
        .order_by('joined_at')
    )


@transaction.atomic
def join_room(*, user: User, join_code: str) -> Room:
    """
    Join a room using its join code.

    Locks the room row so two users cannot both take the last free slot.

    Args:
        user: User joining the room
        join_code: The room's join code

    Returns:
        The joined Room

    Raises:
        RoomNotFoundError: If no room has that join code
        AlreadyInRoomError: If user already belongs to a room
        RoomFullError: If the room has no free slot
    """
    try:
        room = (
            Room.objects
            .select_for_update()
            .get(join_code=join_code.strip().upper())
        )
    except Room.DoesNotExist:
        raise RoomNotFoundError("Room not found with that join code.")

    if RoomMembership.objects.filter(user=user).exists():
        raise AlreadyInRoomError("You are already a member of a room.")

    if room.is_full():
        raise RoomFullError("Room is full.")

    try:
        RoomMembership.objects.create(user=user, room=room)
    except IntegrityError:
        # One-to-one constraint caught a concurrent join elsewhere
        raise AlreadyInRoomError("You are already a member of a room.")

    log_activity(
        room=room,
        user=user,
        description=f"{user.get_display_name()} joined the room.",
        category=ActivityType.JOIN,
    )
    return room


@transaction.atomic
def leave_room(*, user: User) -> bool:
    """
    Leave the current room.

    When the owner leaves, ownership passes to the longest-standing
    remaining member. When the owner was the last member the room is
    deleted along with its ledger.

    Args:
        user: User leaving the room

    Returns:
        True if the room was deleted, False if it lives on

    Raises:
        NotInRoomError: If user is not a member of any room
    """
    try:
        membership = (
            RoomMembership.objects
            .select_for_update()
            .get(user=user)
        )
    except RoomMembership.DoesNotExist:
        raise NotInRoomError("You are not a member of any room.")

    room = Room.objects.select_for_update().get(id=membership.room_id)
    membership.delete()

    if room.owner_id == user.id:
        successor = (
            RoomMembership.objects
            .filter(room=room)
            .select_related('user')
            .order_by('joined_at')
            .first()
        )
        if successor is None:
            room_id = room.id
            room.delete()
            logger.info("Room %s deleted: last member %s left", room_id, user.id)
            return True

        room.owner = successor.user
        room.save(update_fields=['owner', 'updated_at'])
        logger.info("Room %s ownership passed to %s", room.id, successor.user_id)

    log_activity(
        room=room,
        user=user,
        description=f"{user.get_display_name()} left the room.",
        category=ActivityType.LEAVE,
    )
    return False


@transaction.atomic
def remove_member(*, owner: User, user_id: UUID) -> None:
    """
    Remove a member from the owner's room.

    Args:
        owner: User performing the removal (must own the room)
        user_id: Id of the member to remove

    Raises:
        NotInRoomError: If owner belongs to no room
        NotRoomOwnerError: If owner does not own the room
        CannotRemoveSelfError: If the owner targets themselves
        NotMemberError: If the target is not in the room
    """
    # Same row lock as settle-up, so a removal and a settle-up never interleave
    room = (
        Room.objects
        .select_for_update()
        .get(id=get_room_for_user(user=owner).id)
    )
    if room.owner_id != owner.id:
        raise NotRoomOwnerError("You are not the room owner.")

    if str(user_id) == str(owner.id):
        raise CannotRemoveSelfError("You cannot remove yourself.")

    try:
        membership = (
            RoomMembership.objects
            .select_for_update()
            .select_related('user')
            .get(room=room, user_id=user_id)
        )
    except RoomMembership.DoesNotExist:
        raise NotMemberError("Member not found in this room.")

    removed_user = membership.user
    membership.delete()

    log_activity(
        room=room,
        user=owner,
        description=(
            f"{owner.get_display_name()} removed "
            f"{removed_user.get_display_name()} from the room."
        ),
        category=ActivityType.LEAVE,
    )
