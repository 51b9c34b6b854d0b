"""
Category endpoints. Reads need a login, writes need catalog rights.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from kasir.api.deps import get_current_principal, require
from kasir.core.database import get_db
from kasir.core.security import Capability
from kasir.services.catalog_manager import CategoryManager

router = APIRouter()
category_manager = CategoryManager()
can_manage_catalog = Depends(require(Capability.MANAGE_CATALOG))


class CategoryRequest(BaseModel):
    nama_kategori: str = Field(..., min_length=1, max_length=100, description="Category name")


@router.get("", dependencies=[Depends(get_current_principal)])
def list_categories(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return category_manager.list(db)


@router.post("", status_code=201, dependencies=[can_manage_catalog])
def create_category(category: CategoryRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    # Names are not unique; two categories may share one
    return category_manager.create(db, category.model_dump())


@router.put("/{category_id}", dependencies=[can_manage_catalog])
def update_category(category_id: int, category: CategoryRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return category_manager.update(db, category_id, category.model_dump())


@router.delete("/{category_id}", dependencies=[can_manage_catalog])
def delete_category(category_id: int, db: Session = Depends(get_db)) -> Dict[str, str]:
    return category_manager.delete(db, category_id)
