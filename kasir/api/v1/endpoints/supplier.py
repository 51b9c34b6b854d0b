"""
Supplier endpoints. Reads need a login, writes need supplier rights.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from kasir.api.deps import get_current_principal, require
from kasir.core.database import get_db
from kasir.core.security import Capability
from kasir.services.party_manager import SupplierManager

router = APIRouter()
supplier_manager = SupplierManager()
can_manage_suppliers = Depends(require(Capability.MANAGE_SUPPLIERS))


class SupplierRequest(BaseModel):
    nama_supplier: str = Field(..., min_length=1, max_length=200, description="Supplier name")
    kontak: Optional[str] = Field(None, max_length=100, description="Phone or e-mail")
    alamat: Optional[str] = Field(None, description="Address")


@router.get("", dependencies=[Depends(get_current_principal)])
def list_suppliers(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return supplier_manager.list(db)


@router.post("", status_code=201, dependencies=[can_manage_suppliers])
def create_supplier(supplier: SupplierRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return supplier_manager.create(db, supplier.model_dump())


@router.put("/{supplier_id}", dependencies=[can_manage_suppliers])
def update_supplier(supplier_id: int, supplier: SupplierRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return supplier_manager.update(db, supplier_id, supplier.model_dump())


@router.delete("/{supplier_id}", dependencies=[can_manage_suppliers])
def delete_supplier(supplier_id: int, db: Session = Depends(get_db)) -> Dict[str, str]:
    return supplier_manager.delete(db, supplier_id)
