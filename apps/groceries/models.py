from django.db import models
import uuid


class GroceryItem(models.Model):
    """Something the room still needs to buy."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    room = models.ForeignKey(
        'rooms.Room',
        on_delete=models.CASCADE,
        related_name='grocery_items'
    )
    added_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='grocery_items_added'
    )
    is_purchased = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'grocery_items'
        indexes = [
            models.Index(fields=['room', 'is_purchased', 'created_at'], name='grocery_room_open_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name
