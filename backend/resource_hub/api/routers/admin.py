from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from resource_hub.core.deps import get_db, require_roles
from resource_hub.db.models.user import Role
from resource_hub.schemas.auth import UserCreateIn, UserOut
from resource_hub.crud.users import create_user, list_users

router = APIRouter()

@router.get("/users", response_model=list[UserOut])
def users(db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin))):
    return list_users(db)

@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(data: UserCreateIn, db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin))):
    try:
        return create_user(db, data)
    except ValueError as e:
        if str(e) == "login_exists":
            raise HTTPException(status_code=409, detail="Login already exists")
        raise
