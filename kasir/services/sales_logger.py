"""
Sales Logger service for recording POS transactions.
"""
import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kasir.core.exceptions import (
    BusinessRuleError,
    NotFoundError,
    ServiceError,
    StoreError,
    ValidationError,
)
from kasir.core.security import Principal
from kasir.models.catalog import Item
from kasir.models.parties import Customer
from kasir.models.sales import InvoiceCounter, Sale, SaleLine
from kasir.models.users import User

logger = logging.getLogger(__name__)


def format_invoice_number(day: date, sequence: int) -> str:
    """``INV-YYYYMMDD-####``"""
    return f"INV-{day:%Y%m%d}-{sequence:04d}"


class SalesLogger:
    """Service for logging sales transactions."""

    def record_sale(self, db: Session, sale_data: Dict[str, Any], operator: Principal) -> Dict[str, Any]:
        """
        Record a new sale transaction.

        Args:
            db: Database session; the whole sale runs in its transaction
            sale_data: Dictionary containing sale information
                - id_pelanggan: Optional[int]
                - total_harga: float
                - diskon: float
                - metode_pembayaran: str
                - details: List[Dict] with id_barang, jumlah, harga_satuan, subtotal
            operator: The signed-in user recorded as the cashier

        Returns:
            Dict with a confirmation message, the sale id and its invoice code

        All or nothing: if any line asks for more than the item has in stock,
        no header, no line and no stock change survives.
        """
        details = sale_data.get("details") or []
        if not details:
            raise ValidationError("Sale must contain at least one item")

        now = datetime.now()
        try:
            invoice = self.next_invoice_number(db, now)

            sale = Sale(
                id_user=operator.id,
                id_pelanggan=sale_data.get("id_pelanggan"),
                total_harga=sale_data["total_harga"],
                diskon=sale_data.get("diskon") or 0,
                metode_pembayaran=sale_data["metode_pembayaran"],
                invoice=invoice,
                tanggal=now,
            )
            db.add(sale)
            try:
                db.flush()  # Get the sale ID
            except SQLAlchemyError as e:
                logger.error(f"Failed to save sale header {invoice}: {e}")
                raise StoreError("Could not save transaction header")

            for line in details:
                self._take_stock(db, line["id_barang"], line["jumlah"])
                db.add(SaleLine(
                    id_penjualan=sale.id,
                    id_barang=line["id_barang"],
                    jumlah=line["jumlah"],
                    harga_satuan=line["harga_satuan"],
                    subtotal=line["subtotal"],
                ))

            db.commit()

        except ServiceError:
            db.rollback()
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to record sale: {e}", exc_info=True)
            raise StoreError()

        logger.info(f"Sale recorded successfully: {sale.id} - {invoice}")
        return {"message": "Transaksi penjualan berhasil", "id": sale.id, "invoice": invoice}

    def next_invoice_number(self, db: Session, moment: datetime) -> str:
        """
        Reserve the next invoice number for ``moment``'s calendar day.

        The per-day counter row is bumped with a single upsert inside the
        caller's transaction, so concurrent sales queue on the row lock and
        a rolled-back sale gives its number back. The first sale of a day
        seeds the counter from the sales already recorded that day.
        """
        day = moment.date()
        day_start = datetime.combine(day, time.min)
        counters = InvoiceCounter.__table__

        recorded_today = (
            select(func.count(Sale.id) + 1)
            .where(Sale.tanggal >= day_start, Sale.tanggal < day_start + timedelta(days=1))
            .scalar_subquery()
        )
        insert = self._dialect_insert(db)(counters).values(tanggal=day, last_seq=recorded_today)
        statement = insert.on_conflict_do_update(
            index_elements=[counters.c.tanggal],
            set_={"last_seq": counters.c.last_seq + 1},
        ).returning(counters.c.last_seq)

        sequence = db.execute(statement).scalar_one()
        return format_invoice_number(day, sequence)

    def list_sales(
        self,
        db: Session,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Dict[str, Any]]:
        """Sale headers with customer and cashier names, newest first; ``end`` is exclusive."""
        query = self._headers(db)
        if start is not None:
            query = query.filter(Sale.tanggal >= start)
        if end is not None:
            query = query.filter(Sale.tanggal < end)

        rows = query.order_by(Sale.tanggal.desc(), Sale.id.desc()).all()
        return [self._header_dict(*row) for row in rows]

    def get_sale(self, db: Session, sale_id: int) -> Dict[str, Any]:
        """Sale header plus its lines."""
        row = self._headers(db).filter(Sale.id == sale_id).first()
        if row is None:
            raise NotFoundError(f"Transaksi penjualan with ID {sale_id} not found")

        lines = (
            db.query(SaleLine, Item.nama_barang)
            .outerjoin(Item, SaleLine.id_barang == Item.id)
            .filter(SaleLine.id_penjualan == sale_id)
            .order_by(SaleLine.id)
            .all()
        )
        return {
            "penjualan": self._header_dict(*row),
            "details": [
                {**line.to_dict(), "nama_barang": nama_barang}
                for line, nama_barang in lines
            ],
        }

    def _take_stock(self, db: Session, item_id: int, quantity: int) -> None:
        """Decrement stock only if enough is on hand, as one conditional update."""
        result = db.execute(
            update(Item)
            .where(Item.id == item_id, Item.stok >= quantity)
            .values(stok=Item.stok - quantity)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            logger.info(f"Sale rejected: insufficient stock for item {item_id} (requested {quantity})")
            raise BusinessRuleError(f"Insufficient stock for item ID {item_id}")

    @staticmethod
    def _headers(db: Session):
        return (
            db.query(Sale, Customer.nama_pelanggan, User.nama.label("nama_kasir"))
            .outerjoin(Customer, Sale.id_pelanggan == Customer.id)
            .outerjoin(User, Sale.id_user == User.id)
        )

    @staticmethod
    def _header_dict(sale: Sale, nama_pelanggan: Optional[str], nama_kasir: Optional[str]) -> Dict[str, Any]:
        return {**sale.to_dict(), "nama_pelanggan": nama_pelanggan, "nama_kasir": nama_kasir}

    @staticmethod
    def _dialect_insert(db: Session):
        if db.get_bind().dialect.name == "postgresql":
            return postgresql.insert
        return sqlite.insert
