"""
Purchase Recorder service for goods received from suppliers.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kasir.core.exceptions import NotFoundError, ServiceError, StoreError, ValidationError
from kasir.models.catalog import Item
from kasir.models.parties import Supplier
from kasir.models.purchases import Purchase, PurchaseLine

logger = logging.getLogger(__name__)


class PurchaseRecorder:
    """Service for recording purchases and raising item stock."""

    def record_purchase(self, db: Session, purchase_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Record a purchase and add every line's quantity to stock.

        Args:
            db: Database session; the whole purchase runs in its transaction
            purchase_data: Dictionary containing purchase information
                - id_supplier: Optional[int]
                - total_harga: float
                - details: List[Dict] with id_barang, jumlah, harga_satuan, subtotal

        Returns:
            Dict with a confirmation message and the purchase id

        Any failure rolls back the header, every line and every stock change.
        """
        details = purchase_data.get("details") or []
        if not details:
            raise ValidationError("Purchase must contain at least one item")

        try:
            purchase = Purchase(
                id_supplier=purchase_data.get("id_supplier"),
                total_harga=purchase_data["total_harga"],
                tanggal=datetime.now(),
            )
            db.add(purchase)
            db.flush()  # Get the purchase ID

            for line in details:
                db.add(PurchaseLine(
                    id_pembelian=purchase.id,
                    id_barang=line["id_barang"],
                    jumlah=line["jumlah"],
                    harga_satuan=line["harga_satuan"],
                    subtotal=line["subtotal"],
                ))
                db.flush()

                result = db.execute(
                    update(Item)
                    .where(Item.id == line["id_barang"])
                    .values(stok=Item.stok + line["jumlah"])
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount != 1:
                    logger.error(f"Purchase line references unknown item {line['id_barang']}")
                    raise StoreError()

            db.commit()

        except ServiceError:
            db.rollback()
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to record purchase: {e}", exc_info=True)
            raise StoreError()

        logger.info(f"Purchase recorded successfully: {purchase.id} ({len(details)} lines)")
        return {"message": "Transaksi pembelian berhasil", "id": purchase.id}

    def list_purchases(
        self,
        db: Session,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Dict[str, Any]]:
        """Purchase headers with supplier names, newest first; ``end`` is exclusive."""
        query = (
            db.query(Purchase, Supplier.nama_supplier)
            .outerjoin(Supplier, Purchase.id_supplier == Supplier.id)
        )
        if start is not None:
            query = query.filter(Purchase.tanggal >= start)
        if end is not None:
            query = query.filter(Purchase.tanggal < end)

        rows = query.order_by(Purchase.tanggal.desc(), Purchase.id.desc()).all()
        return [
            {**purchase.to_dict(), "nama_supplier": nama_supplier}
            for purchase, nama_supplier in rows
        ]

    def get_purchase(self, db: Session, purchase_id: int) -> Dict[str, Any]:
        """Purchase header plus its lines."""
        row = (
            db.query(Purchase, Supplier.nama_supplier)
            .outerjoin(Supplier, Purchase.id_supplier == Supplier.id)
            .filter(Purchase.id == purchase_id)
            .first()
        )
        if row is None:
            raise NotFoundError("Transaksi pembelian not found")
        purchase, nama_supplier = row

        lines = (
            db.query(PurchaseLine, Item.nama_barang)
            .outerjoin(Item, PurchaseLine.id_barang == Item.id)
            .filter(PurchaseLine.id_pembelian == purchase_id)
            .order_by(PurchaseLine.id)
            .all()
        )
        return {
            "pembelian": {**purchase.to_dict(), "nama_supplier": nama_supplier},
            "details": [
                {**line.to_dict(), "nama_barang": nama_barang}
                for line, nama_barang in lines
            ],
        }
