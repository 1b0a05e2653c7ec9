"""
Domain exceptions for the activity app.
"""


class ActivityServiceError(Exception):
    """Base exception for activity service errors."""
    pass


class NotRoomOwnerError(ActivityServiceError):
    """Raised when someone other than the room owner clears the feed."""
    pass
