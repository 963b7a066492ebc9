from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.orm import Session

from resource_hub.db.session import SessionLocal
from resource_hub.core.config import settings
from resource_hub.core.security import decode_access_token
from resource_hub.db.models.user import User, Role
from resource_hub.crud.users import get_user_by_login

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_current_user(db: Session = Depends(get_db), token: str | None = Depends(oauth2_scheme)) -> User:
    if not token:
        raise _unauthorized("Not authenticated")
    try:
        claims = decode_access_token(token)
    except JWTError:
        raise _unauthorized("Invalid token")
    user = get_user_by_login(db, claims["sub"])
    if not user or not user.is_active:
        raise _unauthorized("User not found/disabled")
    return user

def require_roles(*roles: Role):
    allowed = {r.value for r in roles}

    def _dep(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        return user
    return _dep

def require_editor(db: Session = Depends(get_db), token: str | None = Depends(oauth2_scheme)) -> User | None:
    """Guard for admin writes; a no-op unless AUTH_REQUIRED is on."""
    if not settings.AUTH_REQUIRED:
        return None
    user = get_current_user(db, token)
    if user.role not in (Role.admin.value, Role.editor.value):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user
