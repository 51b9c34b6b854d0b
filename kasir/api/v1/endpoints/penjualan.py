"""
Sales API endpoints for recording transactions and retrieving sales data.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from kasir.api.deps import get_current_principal
from kasir.core.database import get_db
from kasir.core.security import Principal
from kasir.services.sales_logger import SalesLogger

router = APIRouter()
sales_logger = SalesLogger()


class SaleLineRequest(BaseModel):
    """Request model for sale item."""
    id_barang: int = Field(..., description="Item ID")
    jumlah: int = Field(..., gt=0, description="Quantity sold")
    harga_satuan: float = Field(..., ge=0, description="Unit price")
    subtotal: float = Field(..., ge=0, description="Line total")


class SaleRequest(BaseModel):
    """Request model for recording a sale."""
    id_pelanggan: Optional[int] = Field(None, description="Customer ID")
    total_harga: float = Field(..., ge=0, description="Declared total")
    diskon: float = Field(0, ge=0, description="Discount amount")
    metode_pembayaran: str = Field(..., min_length=1, max_length=50, description="Payment method")
    details: List[SaleLineRequest] = Field(..., min_length=1, description="Sale items")


@router.get("", dependencies=[Depends(get_current_principal)])
def list_sales(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return sales_logger.list_sales(db)


@router.get("/{sale_id}", dependencies=[Depends(get_current_principal)])
def get_sale(sale_id: int, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return sales_logger.get_sale(db, sale_id)


@router.post("", status_code=201)
def record_sale(
    sale: SaleRequest,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """
    Record a new sale transaction.

    Assigns an invoice number and takes every line out of stock. The whole
    sale is rejected if any line asks for more than is in stock.
    """
    return sales_logger.record_sale(db, sale.model_dump(), operator=principal)
