import logging
from typing import Optional
from sqlmodel import Session, select

from app.core.errors import InvalidCredentialsError, UserAlreadyExistsError
from app.core.security import get_password_hash, verify_password, create_session_token
from app.models.user import User
from app.schemas import UserCreate

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, session: Session):
        self.session = session

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.username == username)).first()

    def register_user(self, user_in: UserCreate) -> User:
        if self.get_user_by_username(user_in.username):
            raise UserAlreadyExistsError()

        user = User(
            username=user_in.username,
            name=user_in.name,
            surname=user_in.surname,
            password_hash=get_password_hash(user_in.password),
            role=user_in.role,
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)

        logger.info("Registered %s with role %s", user.username, user.role.value)
        return user

    def authenticate_user(self, username: str, password: str) -> User:
        user = self.get_user_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", username)
            raise InvalidCredentialsError()
        return user

    def create_session(self, user: User) -> str:
        return create_session_token({"sub": user.username, "role": user.role.value})
