"""
Database models for the Kasir application.
"""

from .users import User
from .catalog import Category, ItemType, Item
from .parties import Supplier, Customer
from .purchases import Purchase, PurchaseLine
from .sales import Sale, SaleLine, InvoiceCounter

__all__ = [
    "User",
    "Category", "ItemType", "Item",
    "Supplier", "Customer",
    "Purchase", "PurchaseLine",
    "Sale", "SaleLine", "InvoiceCounter",
]
