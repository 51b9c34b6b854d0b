"""
Item type endpoints. Reads need a login, writes need catalog rights.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from kasir.api.deps import get_current_principal, require
from kasir.core.database import get_db
from kasir.core.security import Capability
from kasir.services.catalog_manager import ItemTypeManager

router = APIRouter()
item_type_manager = ItemTypeManager()
can_manage_catalog = Depends(require(Capability.MANAGE_CATALOG))


class ItemTypeRequest(BaseModel):
    nama_jenis: str = Field(..., min_length=1, max_length=100, description="Item type name")


@router.get("", dependencies=[Depends(get_current_principal)])
def list_item_types(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return item_type_manager.list(db)


@router.post("", status_code=201, dependencies=[can_manage_catalog])
def create_item_type(item_type: ItemTypeRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return item_type_manager.create(db, item_type.model_dump())


@router.put("/{item_type_id}", dependencies=[can_manage_catalog])
def update_item_type(item_type_id: int, item_type: ItemTypeRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return item_type_manager.update(db, item_type_id, item_type.model_dump())


@router.delete("/{item_type_id}", dependencies=[can_manage_catalog])
def delete_item_type(item_type_id: int, db: Session = Depends(get_db)) -> Dict[str, str]:
    return item_type_manager.delete(db, item_type_id)
