"""
Login endpoint exchanging credentials for a signed token.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from kasir.core.database import get_db
from kasir.services.user_manager import UserManager

router = APIRouter()
user_manager = UserManager()


class LoginRequest(BaseModel):
    """Request model for logging in."""
    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Plaintext password")


@router.post("/login")
def login(credentials: LoginRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Log in with username and password.

    Returns a token valid for 8 hours and the user's profile.
    """
    return user_manager.authenticate(db, credentials.username, credentials.password)
