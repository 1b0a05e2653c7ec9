from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Expense(models.Model):
    """Money a member put into the room's shared pool."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    room = models.ForeignKey(
        'rooms.Room',
        on_delete=models.CASCADE,
        related_name='expenses'
    )
    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    added_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='expenses_added'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['room', 'created_at'], name='expense_room_created_idx'),
            models.Index(fields=['room', 'added_by'], name='expense_room_payer_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.description} - {self.amount}"


class Settlement(models.Model):
    """Payment a member made to catch up to the room's per-head share."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    room = models.ForeignKey(
        'rooms.Room',
        on_delete=models.CASCADE,
        related_name='settlements'
    )
    paid_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='settlements_paid'
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'settlements'
        indexes = [
            models.Index(fields=['room', 'created_at'], name='settle_room_created_idx'),
            models.Index(fields=['room', 'paid_by'], name='settle_room_payer_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.paid_by.get_display_name()} settled {self.amount}"
