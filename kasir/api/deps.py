"""
Request dependencies: authentication and capability checks.
"""
from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from kasir.core.exceptions import MissingTokenError, PermissionDeniedError
from kasir.core.security import Capability, Principal, decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """Verify the bearer token and return the caller."""
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    return decode_access_token(credentials.credentials)


def require(*capabilities: Capability) -> Callable[..., Principal]:
    """Dependency factory: the authenticated caller must hold every capability."""

    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has(*capabilities):
            raise PermissionDeniedError()
        return principal

    return dependency
