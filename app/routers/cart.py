from typing import List
from fastapi import APIRouter, Depends, Path, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlmodel import Session

from app.db.session import get_session
from app.models.user import User
from app.routers.auth import require_customer, require_admin_or_manager
from app.schemas import CartOut, CartProductIn, NON_BLANK
from app.services.cart import CartService

router = APIRouter()

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)

async def get_cart_product(
    request: Request,
    current_user: User = Depends(require_customer),
) -> str:
    """
    Model name from the JSON body. The body is read here, after the session
    is checked, so anonymous requests never reach validation.
    """
    invalid_model = [{"loc": ("body", "model"), "msg": "Invalid value", "type": "value_error"}]
    try:
        payload = await request.json()
    except ValueError:
        raise RequestValidationError(invalid_model)
    if not isinstance(payload, dict):
        raise RequestValidationError(invalid_model)

    try:
        return CartProductIn.model_validate(payload).model
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in e.errors()]
        )

def ok() -> Response:
    return Response(status_code=status.HTTP_200_OK)

@router.get("", response_model=CartOut)
def get_cart(
    current_user: User = Depends(require_customer),
    service: CartService = Depends(get_cart_service),
):
    """Current cart of the logged customer"""
    return service.get_cart(current_user)

@router.post("")
def add_to_cart(
    current_user: User = Depends(require_customer),
    model: str = Depends(get_cart_product),
    service: CartService = Depends(get_cart_service),
):
    """Add one unit of a product to the current cart"""
    service.add_to_cart(current_user, model)
    return ok()

@router.patch("")
def checkout_cart(
    current_user: User = Depends(require_customer),
    service: CartService = Depends(get_cart_service),
):
    """Pay the current cart"""
    service.checkout_cart(current_user)
    return ok()

@router.get("/history", response_model=List[CartOut])
def get_cart_history(
    current_user: User = Depends(require_customer),
    service: CartService = Depends(get_cart_service),
):
    return service.get_customer_carts(current_user)

@router.delete("/products/{model}")
def remove_product_from_cart(
    current_user: User = Depends(require_customer),
    model: str = Path(..., min_length=1, pattern=NON_BLANK),
    service: CartService = Depends(get_cart_service),
):
    """Remove one unit of a product from the current cart"""
    service.remove_product_from_cart(current_user, model)
    return ok()

@router.delete("/current")
def clear_cart(
    current_user: User = Depends(require_customer),
    service: CartService = Depends(get_cart_service),
):
    """Empty the current cart"""
    service.clear_cart(current_user)
    return ok()

@router.delete("")
def delete_all_carts(
    current_user: User = Depends(require_admin_or_manager),
    service: CartService = Depends(get_cart_service),
):
    service.delete_all_carts()
    return ok()

@router.get("/all", response_model=List[CartOut])
def get_all_carts(
    current_user: User = Depends(require_admin_or_manager),
    service: CartService = Depends(get_cart_service),
):
    return service.get_all_carts()
