"""
Rooms app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    RoomsServiceError,
    RoomNotFoundError,
    NotInRoomError,
    AlreadyInRoomError,
    RoomFullError,
    NotRoomOwnerError,
    CannotRemoveSelfError,
    NotMemberError,
)

from .room_management import (
    create_room,
    delete_room,
    toggle_lock,
    list_public_rooms,
)

from .membership_management import (
    get_room_for_user,
    get_room_members,
    join_room,
    leave_room,
    remove_member,
)


__all__ = [
    # Exceptions
    'RoomsServiceError',
    'RoomNotFoundError',
    'NotInRoomError',
    'AlreadyInRoomError',
    'RoomFullError',
    'NotRoomOwnerError',
    'CannotRemoveSelfError',
    'NotMemberError',

    # Room Management
    'create_room',
    'delete_room',
    'toggle_lock',
    'list_public_rooms',

    # Membership Management
    'get_room_for_user',
    'get_room_members',
    'join_room',
    'leave_room',
    'remove_member',
]
