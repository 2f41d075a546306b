from datetime import datetime
from typing import Annotated, Optional

from pydantic import StringConstraints

from app.schemas.base import CamelModel

UsernameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]
PasswordStr = Annotated[str, StringConstraints(min_length=1, max_length=128)]


class LoginRequest(CamelModel):
    username: UsernameStr
    password: PasswordStr


class UserResponse(CamelModel):
    id: int
    username: str
    name: str
    email: str
    is_admin: bool
    loyalty_points: int
    created_at: Optional[datetime] = None


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
