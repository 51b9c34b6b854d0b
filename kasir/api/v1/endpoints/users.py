"""
User account endpoints (admin only).
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from kasir.api.deps import require
from kasir.core.database import get_db
from kasir.core.security import Capability
from kasir.services.user_manager import UserManager

router = APIRouter(dependencies=[Depends(require(Capability.MANAGE_USERS))])
user_manager = UserManager()


class UserCreateRequest(BaseModel):
    """Request model for creating a user."""
    nama: str = Field(..., min_length=1, description="Display name")
    username: str = Field(..., min_length=1, max_length=50, description="Unique username")
    password: str = Field(..., min_length=1, description="Plaintext password")
    role: str = Field("kasir", min_length=1, max_length=20, description="Role (admin or kasir)")


class UserUpdateRequest(BaseModel):
    """Request model for updating a user; omit password to keep the current one."""
    nama: str = Field(..., min_length=1, description="Display name")
    username: str = Field(..., min_length=1, max_length=50, description="Unique username")
    password: Optional[str] = Field(None, description="New plaintext password")
    role: str = Field(..., min_length=1, max_length=20, description="Role (admin or kasir)")


@router.get("")
def list_users(db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    return user_manager.list(db)


@router.post("", status_code=201)
def create_user(user: UserCreateRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return user_manager.create(db, user.model_dump())


@router.put("/{user_id}")
def update_user(user_id: int, user: UserUpdateRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return user_manager.update(db, user_id, user.model_dump())


@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)) -> Dict[str, str]:
    return user_manager.delete(db, user_id)
