from fastapi import APIRouter, Depends

from app.routers.auth import get_auth_service
from app.schemas import UserCreate, UserOut
from app.services.auth import AuthService

router = APIRouter()

@router.post("", response_model=UserOut)
def create_user(user_in: UserCreate, service: AuthService = Depends(get_auth_service)):
    """
    Register a new user with one of the Customer, Manager or Admin roles.
    """
    return service.register_user(user_in)
