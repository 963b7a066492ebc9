from sqlalchemy.orm import Session
from resource_hub.db.models.user import User
from resource_hub.core.security import hash_password, verify_password
from resource_hub.schemas.auth import UserCreateIn

def get_user_by_login(db: Session, login: str) -> User | None:
    return db.query(User).filter(User.login == login).one_or_none()

def list_users(db: Session):
    return db.query(User).order_by(User.id).all()

def create_user(db: Session, data: UserCreateIn) -> User:
    if get_user_by_login(db, data.login):
        raise ValueError("login_exists")
    u = User(
        login=data.login,
        password_hash=hash_password(data.password),
        role=data.role.value,
        full_name=data.full_name,
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    return u

def authenticate(db: Session, login: str, password: str) -> User | None:
    u = get_user_by_login(db, login)
    if not u or not u.is_active:
        return None
    if not verify_password(password, u.password_hash):
        return None
    return u
