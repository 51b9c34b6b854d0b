"""
Report Builder service for dashboard metrics and stock reports.
"""
import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from kasir.core.config import settings
from kasir.models.catalog import Category, Item
from kasir.models.purchases import Purchase
from kasir.models.sales import Sale, SaleLine
from kasir.services.catalog_manager import ItemManager

logger = logging.getLogger(__name__)


def day_range(start_date: date, end_date: date) -> Tuple[datetime, datetime]:
    """Inclusive start day to exclusive day after ``end_date``."""
    return (
        datetime.combine(start_date, time.min),
        datetime.combine(end_date + timedelta(days=1), time.min),
    )


class ReportBuilder:
    """Read-only aggregate queries."""

    def __init__(self):
        self.item_manager = ItemManager()

    def get_dashboard(self, db: Session, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Dashboard overview.

        Returns daily sales for the last 7 days, sales per category and
        payment method counts for the last 30 days, the lowest-stock items,
        and month-to-date totals.
        """
        now = now or datetime.now()
        week_ago = now - timedelta(days=7)
        month_ago = now - timedelta(days=30)
        month_start = datetime.combine(now.date().replace(day=1), time.min)

        sale_day = func.date(Sale.tanggal)
        daily_sales = (
            db.query(
                sale_day.label("tanggal"),
                func.count(Sale.id).label("jumlah_transaksi"),
                func.sum(Sale.total_harga).label("total_penjualan"),
            )
            .filter(Sale.tanggal >= week_ago)
            .group_by(sale_day)
            .order_by(sale_day)
            .all()
        )

        sales_per_category = (
            db.query(
                Category.nama_kategori,
                func.sum(SaleLine.subtotal).label("total_penjualan"),
            )
            .select_from(SaleLine)
            .join(Item, SaleLine.id_barang == Item.id)
            .join(Category, Item.id_kategori == Category.id)
            .join(Sale, SaleLine.id_penjualan == Sale.id)
            .filter(Sale.tanggal >= month_ago)
            .group_by(Category.nama_kategori)
            .order_by(Category.nama_kategori)
            .all()
        )

        low_stock = (
            db.query(Item.id, Item.nama_barang, Item.stok)
            .filter(Item.stok <= settings.low_stock_threshold)
            .order_by(Item.stok, Item.id)
            .limit(settings.low_stock_limit)
            .all()
        )

        payment_methods = (
            db.query(Sale.metode_pembayaran, func.count(Sale.id).label("jumlah"))
            .filter(Sale.tanggal >= month_ago)
            .group_by(Sale.metode_pembayaran)
            .order_by(Sale.metode_pembayaran)
            .all()
        )

        sales_this_month = db.query(func.sum(Sale.total_harga)).filter(Sale.tanggal >= month_start).scalar()
        purchases_this_month = db.query(func.sum(Purchase.total_harga)).filter(Purchase.tanggal >= month_start).scalar()
        transactions_this_month = db.query(func.count(Sale.id)).filter(Sale.tanggal >= month_start).scalar()
        item_count = db.query(func.count(Item.id)).scalar()

        return {
            "transaksiHarian": [
                {
                    "tanggal": str(row.tanggal),
                    "jumlah_transaksi": int(row.jumlah_transaksi),
                    "total_penjualan": float(row.total_penjualan or 0),
                }
                for row in daily_sales
            ],
            "penjualanPerKategori": [
                {
                    "nama_kategori": row.nama_kategori,
                    "total_penjualan": float(row.total_penjualan or 0),
                }
                for row in sales_per_category
            ],
            "barangHampirHabis": [
                {"id": row.id, "nama_barang": row.nama_barang, "stok": row.stok}
                for row in low_stock
            ],
            "metodePembayaran": [
                {"metode_pembayaran": row.metode_pembayaran, "jumlah": int(row.jumlah)}
                for row in payment_methods
            ],
            "summary": {
                "totalPenjualanBulan": float(sales_this_month or 0),
                "totalPembelianBulan": float(purchases_this_month or 0),
                "totalTransaksiBulan": int(transactions_this_month or 0),
                "totalBarang": int(item_count or 0),
            },
        }

    def stock_report(self, db: Session) -> List[Dict[str, Any]]:
        """Every item with category and type names, lowest stock first."""
        return self.item_manager.list_with_names(db, Item.stok, Item.nama_barang, Item.id)
