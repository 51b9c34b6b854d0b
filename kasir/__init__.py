"""
Kasir: point-of-sale and inventory REST backend.
"""

__version__ = "1.0.0"
