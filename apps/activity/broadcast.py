"""
Real-time broadcast backends for room activity.

Every room has one channel, addressed by the room id. The backend in use is
chosen with ``settings.ACTIVITY_BROADCAST_BACKEND`` (a dotted path), the same
way Django picks an email backend:

    ACTIVITY_BROADCAST_BACKEND = 'apps.activity.broadcast.LoggingBroadcastBackend'

A websocket gateway can plug in by subclassing ``BaseBroadcastBackend`` and
implementing ``send``.
"""

import logging

from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

ACTIVITY_EVENT = 'activityNotification'

# Events captured by LocMemBroadcastBackend, like django.core.mail.outbox
outbox = []


class BaseBroadcastBackend:
    """Interface for pushing an event to everyone listening on a room."""

    def send(self, room_id, event, payload):
        raise NotImplementedError('Subclasses must implement send()')


class LoggingBroadcastBackend(BaseBroadcastBackend):
    """Writes events to the log instead of a live socket."""

    def send(self, room_id, event, payload):
        logger.info(
            "Broadcast %s to room %s: %s",
            event,
            room_id,
            payload.get('description', ''),
        )


class LocMemBroadcastBackend(BaseBroadcastBackend):
    """Keeps events in the module-level ``outbox`` list for tests."""

    def send(self, room_id, event, payload):
        outbox.append({
            'room': str(room_id),
            'event': event,
            'payload': payload,
        })


def get_broadcast_backend(path=None):
    """Instantiate the configured broadcast backend."""
    backend_class = import_string(path or settings.ACTIVITY_BROADCAST_BACKEND)
    return backend_class()


def broadcast_to_room(room_id, event, payload):
    """Send ``payload`` to every client subscribed to ``room_id``."""
    get_broadcast_backend().send(str(room_id), event, payload)
