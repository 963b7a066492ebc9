from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from resource_hub.core.deps import get_db, get_current_user
from resource_hub.core.logging import logger
from resource_hub.schemas.auth import LoginIn, TokenOut, UserOut
from resource_hub.crud.users import authenticate
from resource_hub.core.security import create_access_token

router = APIRouter()

@router.post("/login", response_model=TokenOut)
def login(data: LoginIn, db: Session = Depends(get_db)):
    user = authenticate(db, data.login, data.password)
    if not user:
        logger.info("login_failed", login=data.login)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return TokenOut(access_token=create_access_token(user.login, user.role))

@router.get("/me", response_model=UserOut)
def me(user = Depends(get_current_user)):
    return user
