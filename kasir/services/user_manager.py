"""
User account management and login.
"""
import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kasir.core.exceptions import AuthenticationError, ConflictError
from kasir.core.security import (
    ADMIN_ROLE,
    Principal,
    create_access_token,
    hash_password,
    verify_password,
)
from kasir.models.users import User
from kasir.services.crud import CrudService

logger = logging.getLogger(__name__)


class UserManager(CrudService):
    """Service for user accounts. Password hashes never leave this class."""

    model = User
    label = "User"
    order_by = ("id",)
    fields = ("nama", "username", "role")

    def create(self, db: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        self._ensure_username_free(db, data["username"])

        user = User(
            nama=data["nama"],
            username=data["username"],
            role=data["role"],
            password_hash=hash_password(data["password"]),
        )
        db.add(user)
        self._commit(db, "create", ConflictError("Username already exists"))
        db.refresh(user)
        logger.info(f"User {user.id} ({user.username}) created")
        return user.to_dict()

    def update(self, db: Session, record_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update a user; the password is re-hashed only when a new one is given.
        """
        if data.get("username"):
            self._ensure_username_free(db, data["username"], exclude_id=record_id)

        user = self.get(db, record_id)
        for name, value in self._writable(data).items():
            setattr(user, name, value)
        if data.get("password"):
            user.password_hash = hash_password(data["password"])

        self._commit(db, "update", ConflictError("Username already exists"))
        db.refresh(user)
        logger.info(f"User {record_id} updated")
        return user.to_dict()

    def authenticate(self, db: Session, username: str, password: str) -> Dict[str, Any]:
        """
        Exchange username and password for a signed token.

        An unknown username and a wrong password fail with the same message.
        """
        try:
            user = db.query(User).filter(User.username == username).first()
        except SQLAlchemyError as e:
            raise self._store_failure(db, "look up", e)

        if user is None or not self._password_matches(user, password):
            logger.info(f"Failed login attempt for {username!r}")
            raise AuthenticationError()

        principal = Principal(id=user.id, username=user.username, role=user.role)
        return {
            "token": create_access_token(principal),
            "user": {
                "id": user.id,
                "username": user.username,
                "nama": user.nama,
                "role": user.role,
            },
        }

    def ensure_admin(self, db: Session, username: str, password: str, nama: str) -> Optional[Dict[str, Any]]:
        """Create the first admin account when no user exists yet."""
        if db.query(User.id).first() is not None:
            return None
        logger.info(f"No users found, creating admin account {username!r}")
        return self.create(db, {"nama": nama, "username": username, "password": password, "role": ADMIN_ROLE})

    def _ensure_username_free(self, db: Session, username: str, exclude_id: Optional[int] = None) -> None:
        query = db.query(User.id).filter(User.username == username)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        try:
            taken = query.first() is not None
        except SQLAlchemyError as e:
            raise self._store_failure(db, "look up", e)
        if taken:
            raise ConflictError("Username already exists")

    @staticmethod
    def _password_matches(user: User, password: str) -> bool:
        try:
            return verify_password(password, user.password_hash)
        except ValueError:
            # Unrecognised hash format in the store
            logger.warning(f"Stored password hash for user {user.id} is unreadable")
            return False
