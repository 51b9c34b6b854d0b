"""
Purchase endpoints for recording goods received from suppliers.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from kasir.api.deps import require
from kasir.core.database import get_db
from kasir.core.security import Capability
from kasir.services.purchase_recorder import PurchaseRecorder

router = APIRouter(dependencies=[Depends(require(Capability.MANAGE_PURCHASES))])
purchase_recorder = PurchaseRecorder()


class PurchaseLineRequest(BaseModel):
    """Request model for one purchased item."""
    id_barang: int = Field(..., description="Item ID")
    jumlah: int = Field(..., gt=0, description="Quantity received")
    harga_satuan: float = Field(..., ge=0, description="Unit price")
    subtotal: float = Field(..., ge=0, description="Line total")


class PurchaseRequest(BaseModel):
    """Request model for recording a purchase."""
    id_supplier: Optional[int] = Field(None, description="Supplier ID")
    total_harga: float = Field(..., ge=0, description="Declared total")
    details: List[PurchaseLineRequest] = Field(..., min_length=1, description="Purchased items")


@router.get("")
def list_purchases(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return purchase_recorder.list_purchases(db)


@router.get("/{purchase_id}")
def get_purchase(purchase_id: int, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return purchase_recorder.get_purchase(db, purchase_id)


@router.post("", status_code=201)
def record_purchase(purchase: PurchaseRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Record a purchase.

    Adds each line's quantity to the item's stock. Nothing is kept if any
    line fails.
    """
    return purchase_recorder.record_purchase(db, purchase.model_dump())
