from typing import List, Optional
from sqlmodel import Field, Relationship, SQLModel
from app.models.product import Category

class ProductInCart(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    cart_id: int = Field(foreign_key="cart.id", index=True)

    # Snapshot of the product at the time it was added
    model: str = Field(foreign_key="product.model")
    category: Category
    quantity: int = Field(default=1, ge=1)
    price: float

    cart: Optional["Cart"] = Relationship(back_populates="products")

class Cart(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # References
    customer: str = Field(foreign_key="user.username", index=True)

    # Payment
    paid: bool = Field(default=False)
    payment_date: Optional[str] = None
    total: float = Field(default=0.0)

    # Relationships
    products: List[ProductInCart] = Relationship(
        back_populates="cart",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "ProductInCart.id"},
    )
