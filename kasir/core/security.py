"""
Password hashing, access tokens and role capabilities.
"""
import enum
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, FrozenSet, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from kasir.core.config import settings
from kasir.core.exceptions import InvalidTokenError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ADMIN_ROLE = "admin"


class Capability(str, enum.Enum):
    """Privileges that guard mutating and admin-only operations."""
    MANAGE_USERS = "users:manage"
    MANAGE_CATALOG = "catalog:manage"
    MANAGE_SUPPLIERS = "suppliers:manage"
    DELETE_CUSTOMERS = "customers:delete"
    MANAGE_PURCHASES = "purchases:manage"
    VIEW_ADMIN_REPORTS = "reports:admin"


ROLE_CAPABILITIES: Dict[str, FrozenSet[Capability]] = {
    ADMIN_ROLE: frozenset(Capability),
}


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a request."""
    id: int
    username: str
    role: str

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return ROLE_CAPABILITIES.get(self.role, frozenset())

    def has(self, *required: Capability) -> bool:
        return self.capabilities.issuperset(required)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(principal: Principal, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token carrying the principal's id, username and role."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "id": principal.id,
        "username": principal.username,
        "role": principal.role,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Principal:
    """Verify signature and expiry and rebuild the principal."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return Principal(
            id=int(payload["id"]),
            username=payload["username"],
            role=payload["role"],
        )
    except (JWTError, KeyError, TypeError, ValueError):
        raise InvalidTokenError()
