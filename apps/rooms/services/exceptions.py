"""
Domain-specific exceptions for rooms app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class RoomsServiceError(Exception):
    """Base exception for all rooms service errors."""
    pass


class RoomNotFoundError(RoomsServiceError):
    """Raised when no room matches the id or join code."""
    pass


class NotInRoomError(RoomsServiceError):
    """Raised when a user who belongs to no room asks for room data."""
    pass


class AlreadyInRoomError(RoomsServiceError):
    """Raised when a user who already has a room creates or joins another."""
    pass


class RoomFullError(RoomsServiceError):
    """Raised when a room has reached max_members."""
    pass


class NotRoomOwnerError(RoomsServiceError):
    """Raised when an owner-only action is attempted by someone else."""
    pass


class CannotRemoveSelfError(RoomsServiceError):
    """Raised when the owner tries to remove themselves instead of leaving."""
    pass


class NotMemberError(RoomsServiceError):
    """Raised when the target user is not a member of the room."""
    pass
