# Import all models to register them with SQLModel
from app.models.user import User, Role
from app.models.product import Product, Category
from app.models.cart import Cart, ProductInCart

__all__ = [
    "User",
    "Role",
    "Product",
    "Category",
    "Cart",
    "ProductInCart",
]
