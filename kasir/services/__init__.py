"""
Business logic services for the Kasir application.
"""

from .catalog_manager import CategoryManager, ItemTypeManager, ItemManager
from .party_manager import SupplierManager, CustomerManager
from .user_manager import UserManager
from .purchase_recorder import PurchaseRecorder
from .sales_logger import SalesLogger
from .report_builder import ReportBuilder

__all__ = [
    "CategoryManager",
    "ItemTypeManager",
    "ItemManager",
    "SupplierManager",
    "CustomerManager",
    "UserManager",
    "PurchaseRecorder",
    "SalesLogger",
    "ReportBuilder",
]
