# ==========================================
# apps/rooms/models.py
# ==========================================

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
import secrets
import string
import uuid


JOIN_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_join_code(length=None):
    """Random upper-case alphanumeric join code."""
    length = length or settings.ROOM_JOIN_CODE_LENGTH
    return ''.join(secrets.choice(JOIN_CODE_ALPHABET) for _ in range(length))


class Room(models.Model):
    """Household whose members share expenses and an activity feed."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=200)
    contact = models.CharField(max_length=200)
    is_public = models.BooleanField(default=False)
    max_members = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    join_code = models.CharField(max_length=16, unique=True, db_index=True, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='owned_rooms')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rooms'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='rooms_owner_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.join_code:
            self.join_code = generate_join_code()
        super().save(*args, **kwargs)

    def has_member(self, user):
        return self.memberships.filter(user=user).exists()

    def member_count(self):
        return self.memberships.count()

    def is_full(self):
        return self.member_count() >= self.max_members


class RoomMembership(models.Model):
    """A user's membership in their one current room."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField('accounts.User', on_delete=models.CASCADE, related_name='room_membership')
    room = models.ForeignKey(Room, on_delete=models.CASCADE, related_name='memberships')
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'room_memberships'
        indexes = [
            models.Index(fields=['room', 'joined_at'], name='room_member_joined_idx'),
        ]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.room.name}"
