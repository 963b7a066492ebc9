from pydantic import Field

from resource_hub.db.models.user import Role
from resource_hub.schemas._base import ApiModel

class TokenOut(ApiModel):
    access_token: str
    token_type: str = "bearer"

class LoginIn(ApiModel):
    login: str
    password: str

class UserCreateIn(ApiModel):
    login: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=6, max_length=128)
    role: Role = Role.editor
    full_name: str | None = None

class UserOut(ApiModel):
    id: int
    login: str
    full_name: str | None = None
    role: str
    is_active: bool
