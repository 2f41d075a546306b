import logging
from typing import Tuple

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.security import create_access_token, verify_password
from app.models.user import User
from app.repository import user_repository
from app.schemas.auth import LoginRequest

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def login_user(self, login_data: LoginRequest) -> Tuple[str, User]:
        user = user_repository.get_user_by_username(self.db, login_data.username)
        if not user or not verify_password(login_data.password, user.password_hash):
            logger.info("Rejected login for username %s", login_data.username)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )

        return create_access_token(user), user
