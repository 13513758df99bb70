from typing import Optional
from fastapi import APIRouter, Depends, Response
from fastapi.security import APIKeyCookie
from sqlmodel import Session

from app.core.config import settings
from app.core.errors import UnauthenticatedError, UnauthorizedUserError
from app.core.security import decode_session_token
from app.db.session import get_session
from app.models.user import Role, User
from app.schemas import SessionCreate, UserOut
from app.services.auth import AuthService

router = APIRouter()

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)

def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(session)

async def get_current_user(
    token: Optional[str] = Depends(session_cookie),
    service: AuthService = Depends(get_auth_service),
) -> User:
    if not token:
        raise UnauthenticatedError()

    username = decode_session_token(token)
    if username is None:
        raise UnauthenticatedError()

    user = service.get_user_by_username(username)
    if user is None:
        raise UnauthenticatedError()
    return user

def require_customer(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != Role.CUSTOMER:
        raise UnauthorizedUserError("User is not a customer")
    return current_user

def require_admin_or_manager(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role not in (Role.ADMIN, Role.MANAGER):
        raise UnauthorizedUserError("User is not an admin or manager")
    return current_user

@router.post("", response_model=UserOut)
def login(
    credentials: SessionCreate,
    response: Response,
    service: AuthService = Depends(get_auth_service),
):
    """Log in and set the session cookie"""
    user = service.authenticate_user(credentials.username, credentials.password)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=service.create_session(user),
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
    )
    return user

@router.get("/current", response_model=UserOut)
def read_current_session(current_user: User = Depends(get_current_user)):
    return current_user

@router.delete("/current")
def logout(response: Response, current_user: User = Depends(get_current_user)):
    response.delete_cookie(settings.SESSION_COOKIE_NAME, httponly=True, samesite="lax")
    return None
