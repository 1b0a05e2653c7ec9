"""
Domain exceptions for groceries app.

Exception Hierarchy:
    GroceriesServiceError (base)
    ├── GroceryItemNotFoundError
    └── AlreadyPurchasedError
"""


class GroceriesServiceError(Exception):
    """Base exception for all groceries service errors."""
    pass


class GroceryItemNotFoundError(GroceriesServiceError):
    """Raised when an item does not exist in the user's room."""
    pass


class AlreadyPurchasedError(GroceriesServiceError):
    """Raised when an item has already been bought."""
    pass
