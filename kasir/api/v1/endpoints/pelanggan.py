"""
Customer endpoints. Any signed-in user may register or edit a customer;
deleting one needs extra rights.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from kasir.api.deps import get_current_principal, require
from kasir.core.database import get_db
from kasir.core.security import Capability
from kasir.services.party_manager import CustomerManager

router = APIRouter(dependencies=[Depends(get_current_principal)])
customer_manager = CustomerManager()


class CustomerRequest(BaseModel):
    nama_pelanggan: str = Field(..., min_length=1, max_length=200, description="Customer name")
    kontak: Optional[str] = Field(None, max_length=100, description="Phone or e-mail")
    alamat: Optional[str] = Field(None, description="Address")


@router.get("")
def list_customers(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return customer_manager.list(db)


@router.post("", status_code=201)
def create_customer(customer: CustomerRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return customer_manager.create(db, customer.model_dump())


@router.put("/{customer_id}")
def update_customer(customer_id: int, customer: CustomerRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return customer_manager.update(db, customer_id, customer.model_dump())


@router.delete("/{customer_id}", dependencies=[Depends(require(Capability.DELETE_CUSTOMERS))])
def delete_customer(customer_id: int, db: Session = Depends(get_db)) -> Dict[str, str]:
    return customer_manager.delete(db, customer_id)
