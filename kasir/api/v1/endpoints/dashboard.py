"""
Dashboard API endpoint for aggregated metrics.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from kasir.api.deps import get_current_principal
from kasir.core.database import get_db
from kasir.services.report_builder import ReportBuilder

router = APIRouter()
report_builder = ReportBuilder()


@router.get("", dependencies=[Depends(get_current_principal)])
def get_dashboard(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Get dashboard overview.

    Returns daily sales, sales per category, low-stock items, payment
    method counts and month-to-date totals.
    """
    return report_builder.get_dashboard(db)
