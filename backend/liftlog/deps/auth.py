# liftlog/deps/auth.py
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose.exceptions import ExpiredSignatureError, JWTError

from liftlog.security import decode_token

# Bearer token issued by the identity provider; auto_error=False so the
# optional variant can see "no token" instead of a 401
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)

def _unauthorized(detail: str = "Not authenticated") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

def _user_id_from_token(token: str) -> Optional[str]:
    """Return the opaque user id (``sub``) or None when the token is unusable."""
    try:
        payload = decode_token(token)
    except JWTError:
        return None
    sub = payload.get("sub")
    if not sub:
        return None
    return str(sub)

def get_current_user_id(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    """Hard guard for reads and workout create/update: no identity -> 401."""
    if not token:
        raise _unauthorized()
    try:
        payload = decode_token(token)
    except ExpiredSignatureError:
        raise _unauthorized("Token expired")
    except JWTError:
        raise _unauthorized()
    sub = payload.get("sub")
    if not sub:
        raise _unauthorized()
    return str(sub)

def get_optional_user_id(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    """
    Soft guard for exercise/set actions: they report a missing identity as a
    structured failure result instead of an HTTP error.
    """
    if not token:
        return None
    return _user_id_from_token(token)
