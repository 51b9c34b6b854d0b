"""
Catalog services: categories, item types and stocked items.
"""
import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kasir.models.catalog import Category, ItemType, Item
from kasir.services.crud import CrudService

logger = logging.getLogger(__name__)


class CategoryManager(CrudService):
    model = Category
    label = "Kategori"
    order_by = ("nama_kategori", "id")
    fields = ("nama_kategori",)


class ItemTypeManager(CrudService):
    model = ItemType
    label = "Jenis barang"
    order_by = ("nama_jenis", "id")
    fields = ("nama_jenis",)


class ItemManager(CrudService):
    """Items with their stock count and prices."""

    model = Item
    label = "Barang"
    order_by = ("nama_barang", "id")
    fields = ("nama_barang", "id_kategori", "id_jenis", "stok", "harga_beli", "harga_jual")

    def list(self, db: Session) -> List[Dict[str, Any]]:
        """Items with their category and type names, ordered by name."""
        return self.list_with_names(db, Item.nama_barang, Item.id)

    def list_with_names(self, db: Session, *order) -> List[Dict[str, Any]]:
        try:
            rows = (
                db.query(Item, Category.nama_kategori, ItemType.nama_jenis)
                .outerjoin(Category, Item.id_kategori == Category.id)
                .outerjoin(ItemType, Item.id_jenis == ItemType.id)
                .order_by(*order)
                .all()
            )
        except SQLAlchemyError as e:
            raise self._store_failure(db, "list", e)

        return [
            {**item.to_dict(), "nama_kategori": nama_kategori, "nama_jenis": nama_jenis}
            for item, nama_kategori, nama_jenis in rows
        ]
