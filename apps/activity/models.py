from django.db import models
import uuid


class ActivityType(models.TextChoices):
    JOIN = 'join', 'Join'
    LEAVE = 'leave', 'Leave'
    EXPENSE = 'expense', 'Expense'
    PURCHASE = 'purchase', 'Purchase'
    LOCK = 'lock', 'Lock'
    CALENDAR = 'calendar', 'Calendar'
    CHAT = 'chat', 'Chat'


class Activity(models.Model):
    """Entry in a room's activity feed."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    room = models.ForeignKey('rooms.Room', on_delete=models.CASCADE, related_name='activities')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='activities')
    description = models.TextField()
    type = models.CharField(max_length=20, choices=ActivityType.choices)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'activities'
        verbose_name_plural = 'activities'
        indexes = [
            models.Index(fields=['room', 'created_at'], name='activity_room_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"[{self.type}] {self.description}"
