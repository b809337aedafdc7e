from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from canteen_api import config
from canteen_api.errors import AuthError, ForbiddenError

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)

# verified against when the email is unknown, so both login failures cost the same
_DUMMY_HASH = pwd_context.hash("canteen-dummy-password")


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    is_admin: bool


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: Optional[str]) -> bool:
    if not hashed:
        pwd_context.verify(plain, _DUMMY_HASH)
        return False
    return pwd_context.verify(plain, hashed)


def create_access_token(user_id: int, email: str, is_admin: bool) -> str:
    expire = datetime.now(timezone.utc) + timedelta(days=config.JWT_EXPIRE_DAYS)
    payload = {"sub": str(user_id), "email": email, "is_admin": bool(is_admin), "exp": expire}
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALG)


def decode_token(token: str) -> dict:
    return jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALG])


def verify_token(token: str) -> TokenClaims:
    """Decode a bearer token; anything wrong with it is an AuthError."""
    try:
        payload = decode_token(token)
        return TokenClaims(user_id=int(payload["sub"]), is_admin=bool(payload.get("is_admin", False)))
    except (JWTError, KeyError, TypeError, ValueError):
        raise AuthError("Invalid or expired token")


def current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    if credentials is None or not credentials.credentials:
        raise AuthError("Access token required")
    return verify_token(credentials.credentials)


def require_admin(claims: TokenClaims = Depends(current_claims)) -> TokenClaims:
    if not claims.is_admin:
        raise ForbiddenError("Admin access required")
    return claims
