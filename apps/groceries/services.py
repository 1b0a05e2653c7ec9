"""
Grocery list service.

Members keep a shared shopping list. Buying an item turns it into an
expense for the member who bought it, so it flows into the room's split.
"""

import logging
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import log_activity
from apps.expenses.models import Expense
from apps.expenses.services import validate_amount, InvalidAmountError
from apps.rooms.models import Room

from .exceptions import GroceryItemNotFoundError, AlreadyPurchasedError
from .models import GroceryItem

logger = logging.getLogger(__name__)


def list_grocery_items(*, room: Room) -> QuerySet[GroceryItem]:
    """Items still to buy, newest first."""
    return (
        GroceryItem.objects
        .filter(room=room, is_purchased=False)
        .select_related('added_by')
        .order_by('-created_at')
    )


@transaction.atomic
def add_grocery_item(*, room: Room, user: User, name: str) -> GroceryItem:
    """Put ``name`` on the room's grocery list."""
    item = GroceryItem.objects.create(room=room, added_by=user, name=name)

    log_activity(
        room=room,
        user=user,
        description=f"{user.get_display_name()} added a grocery item: {name}",
        category=ActivityType.EXPENSE,
    )
    return item


@transaction.atomic
def purchase_grocery_item(*, item_id: UUID, room: Room, user: User, amount) -> Expense:
    """
    Mark an item as bought and record what it cost.

    Args:
        item_id: Item to buy; must belong to ``room``
        room: The buyer's room
        user: Member who bought it and paid
        amount: Price paid, greater than zero

    Returns:
        The Expense created for the purchase

    Raises:
        GroceryItemNotFoundError: If the item is not in the room
        AlreadyPurchasedError: If the item was bought before
        InvalidAmountError: If amount is not a positive number
    """
    try:
        item = GroceryItem.objects.select_for_update().get(id=item_id, room=room)
    except GroceryItem.DoesNotExist:
        raise GroceryItemNotFoundError("Item not found")

    if item.is_purchased:
        raise AlreadyPurchasedError("Item has already been purchased.")

    amount = validate_amount(amount)
    if amount == 0:
        raise InvalidAmountError("Amount is required")

    expense = Expense.objects.create(
        room=room,
        description=item.name,
        amount=amount,
        added_by=user,
    )

    log_activity(
        room=room,
        user=user,
        description=f"{user.get_display_name()} purchased a grocery item: {item.name}",
        category=ActivityType.PURCHASE,
    )

    item.is_purchased = True
    item.save(update_fields=['is_purchased', 'updated_at'])

    logger.info("Grocery item %s purchased in room %s for %s", item.id, room.id, amount)
    return expense
