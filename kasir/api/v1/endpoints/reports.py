"""
Report endpoints over date ranges and current stock.
"""
from datetime import date
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from kasir.api.deps import get_current_principal, require
from kasir.core.database import get_db
from kasir.core.exceptions import ValidationError
from kasir.core.security import Capability
from kasir.services.purchase_recorder import PurchaseRecorder
from kasir.services.report_builder import ReportBuilder, day_range
from kasir.services.sales_logger import SalesLogger

router = APIRouter()
report_builder = ReportBuilder()
sales_logger = SalesLogger()
purchase_recorder = PurchaseRecorder()
can_view_admin_reports = Depends(require(Capability.VIEW_ADMIN_REPORTS))


def _checked_range(start_date: date, end_date: date):
    if end_date < start_date:
        raise ValidationError("end_date must not be before start_date")
    return day_range(start_date, end_date)


@router.get("/penjualan", dependencies=[Depends(get_current_principal)])
def sales_report(
    start_date: date = Query(..., description="First day, inclusive"),
    end_date: date = Query(..., description="Last day, inclusive"),
    db: Session = Depends(get_db),
) -> List[Dict[str, Any]]:
    start, end = _checked_range(start_date, end_date)
    return sales_logger.list_sales(db, start=start, end=end)


@router.get("/pembelian", dependencies=[can_view_admin_reports])
def purchase_report(
    start_date: date = Query(..., description="First day, inclusive"),
    end_date: date = Query(..., description="Last day, inclusive"),
    db: Session = Depends(get_db),
) -> List[Dict[str, Any]]:
    start, end = _checked_range(start_date, end_date)
    return purchase_recorder.list_purchases(db, start=start, end=end)


@router.get("/stok", dependencies=[can_view_admin_reports])
def stock_report(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return report_builder.stock_report(db)
