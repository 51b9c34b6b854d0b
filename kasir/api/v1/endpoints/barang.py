"""
Item endpoints for stock and price management.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from kasir.api.deps import get_current_principal, require
from kasir.core.database import get_db
from kasir.core.security import Capability
from kasir.services.catalog_manager import ItemManager

router = APIRouter()
item_manager = ItemManager()
can_manage_catalog = Depends(require(Capability.MANAGE_CATALOG))


class ItemRequest(BaseModel):
    """Request model for creating an item."""
    nama_barang: str = Field(..., min_length=1, max_length=200, description="Item name")
    id_kategori: Optional[int] = Field(None, description="Category ID")
    id_jenis: Optional[int] = Field(None, description="Item type ID")
    stok: int = Field(0, ge=0, description="Units in stock")
    harga_beli: float = Field(0, ge=0, description="Buy price")
    harga_jual: float = Field(0, ge=0, description="Sell price")


class ItemUpdateRequest(ItemRequest):
    """Request model for replacing an item; stock and prices must be sent."""
    stok: int = Field(..., ge=0, description="Units in stock")
    harga_beli: float = Field(..., ge=0, description="Buy price")
    harga_jual: float = Field(..., ge=0, description="Sell price")


@router.get("", dependencies=[Depends(get_current_principal)])
def list_items(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    """List items with their category and type names."""
    return item_manager.list(db)


@router.post("", status_code=201, dependencies=[can_manage_catalog])
def create_item(item: ItemRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return item_manager.create(db, item.model_dump())


@router.put("/{item_id}", dependencies=[can_manage_catalog])
def update_item(item_id: int, item: ItemUpdateRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return item_manager.update(db, item_id, item.model_dump())


@router.delete("/{item_id}", dependencies=[can_manage_catalog])
def delete_item(item_id: int, db: Session = Depends(get_db)) -> Dict[str, str]:
    return item_manager.delete(db, item_id)
