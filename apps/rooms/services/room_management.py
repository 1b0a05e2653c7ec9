"""
Room management service.

Handles room creation and teardown with proper transaction safety.
"""

import logging
from typing import Optional

from django.db import transaction, IntegrityError
from django.db.models import Count, QuerySet

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.rooms.models import Room, RoomMembership, generate_join_code

from .exceptions import AlreadyInRoomError, NotInRoomError, NotRoomOwnerError

logger = logging.getLogger(__name__)


def create_room(
    *,
    owner: User,
    name: str,
    location: str,
    contact: str,
    max_members: int,
    description: str = '',
    is_public: bool = False,
    max_retries: int = 5
) -> Room:
    """
    Create a new room and add the creator as its first member.

    Each attempt runs in its own transaction:
    1. Generate a join code
    2. Create the room
    3. Create the owner membership
    4. Log the activity

    Args:
        owner: User who will own the room
        name: Room name
        location: Where the household is
        contact: How to reach the owner
        max_members: Capacity of the room (>= 1)
        description: Optional room description
        is_public: Whether the room is listed publicly
        max_retries: Maximum attempts to generate a unique join code

    Returns:
        Created Room instance

    Raises:
        AlreadyInRoomError: If owner already belongs to a room
        RuntimeError: If cannot generate unique join code after retries
    """
    if RoomMembership.objects.filter(user=owner).exists():
        raise AlreadyInRoomError("You are already a member of a room. Leave it first.")

    for attempt in range(max_retries):
        join_code = generate_join_code()

        try:
            with transaction.atomic():
                room = Room.objects.create(
                    owner=owner,
                    name=name,
                    description=description,
                    location=location,
                    contact=contact,
                    is_public=is_public,
                    max_members=max_members,
                    join_code=join_code,
                )

                RoomMembership.objects.create(user=owner, room=room)

                log_activity(
                    room=room,
                    user=owner,
                    description=f"{owner.get_display_name()} created the room.",
                    category=ActivityType.JOIN,
                )

                logger.info("Room %s created by %s", room.id, owner.id)
                return room

        except IntegrityError:
            if RoomMembership.objects.filter(user=owner).exists():
                raise AlreadyInRoomError("You are already a member of a room. Leave it first.")
            # Join code collision
            if attempt == max_retries - 1:
                raise RuntimeError(
                    f"Failed to generate unique join code after {max_retries} attempts"
                )
            continue

    raise RuntimeError("Unexpected error in room creation")


@transaction.atomic
def delete_room(*, user: User) -> None:
    """
    Delete the room owned by ``user`` with everything attached to it.

    Expenses, settlements, activities and memberships go through the
    foreign key cascade inside this single transaction, so the ledger is
    never left half-deleted.

    Raises:
        NotInRoomError: If user belongs to no room
        NotRoomOwnerError: If user does not own their room
    """
    try:
        membership = RoomMembership.objects.select_related('room').get(user=user)
    except RoomMembership.DoesNotExist:
        raise NotInRoomError("You are not in a room.")

    room = Room.objects.select_for_update().get(id=membership.room_id)
    if room.owner_id != user.id:
        raise NotRoomOwnerError("You are not the owner of this room.")

    room_id = room.id
    room.delete()
    logger.info("Room %s deleted by %s", room_id, user.id)


@transaction.atomic
def toggle_lock(*, user: User) -> Room:
    """
    Lock or unlock the owner's room.

    An unlocked room is public and shows up in the public listing. Joining
    always needs the join code, locked or not.

    Returns:
        The updated Room

    Raises:
        NotInRoomError: If user belongs to no room
        NotRoomOwnerError: If user does not own their room
    """
    try:
        membership = RoomMembership.objects.get(user=user)
    except RoomMembership.DoesNotExist:
        raise NotInRoomError("You are not in a room.")

    room = Room.objects.select_for_update().get(id=membership.room_id)
    if room.owner_id != user.id:
        raise NotRoomOwnerError("You are not the room owner.")

    room.is_public = not room.is_public
    room.save(update_fields=['is_public', 'updated_at'])

    status = 'unlocked' if room.is_public else 'locked'
    log_activity(
        room=room,
        user=user,
        description=f"{user.get_display_name()} {status} the room.",
        category=ActivityType.LOCK,
    )
    return room


def list_public_rooms(*, location: Optional[str] = None) -> QuerySet[Room]:
    """
    Public rooms with their member count, optionally filtered by location.

    ``location`` matches anywhere in the room's location, ignoring case.
    Each room carries a ``member_total`` annotation.
    """
    queryset = (
        Room.objects
        .filter(is_public=True)
        .annotate(member_total=Count('memberships'))
        .order_by('-created_at')
    )
    if location:
        queryset = queryset.filter(location__icontains=location)
    return queryset
