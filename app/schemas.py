from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.models.product import Category
from app.models.user import Role


class ProductInCartOut(BaseModel):
    """A cart line as returned to clients."""

    model: str
    quantity: int
    category: Category
    price: float

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    """A cart as returned to clients; `paymentDate` stays null until checkout."""

    customer: str
    paid: bool = False
    payment_date: Optional[str] = Field(default=None, serialization_alias="paymentDate")
    total: float = 0.0
    products: List[ProductInCartOut] = []

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    surname: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    role: Role


class UserOut(BaseModel):
    username: str
    name: str
    surname: str
    role: Role
    address: Optional[str] = None
    birthdate: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class SessionCreate(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# Model names must contain at least one visible character
NON_BLANK = r"^\s*\S"


class CartProductIn(BaseModel):
    model: str = Field(..., min_length=1, pattern=NON_BLANK)
