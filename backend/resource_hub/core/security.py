from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from resource_hub.core.config import settings

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

TOKEN_TYPE = "access"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(login: str, role: str, expires_min: int | None = None) -> str:
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=expires_min or settings.JWT_EXPIRES_MIN)
    claims = {
        "sub": login,
        "role": role,
        "typ": TOKEN_TYPE,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_access_token(token: str) -> dict:
    """Decode and verify a token issued by create_access_token.

    Raises JWTError for expired, tampered or foreign tokens.
    """
    claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
    if claims.get("typ") != TOKEN_TYPE or not claims.get("sub"):
        raise JWTError("not an access token")
    return claims
