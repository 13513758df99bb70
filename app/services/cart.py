import logging
from datetime import date
from typing import List, Optional
from sqlmodel import Session

from app.core.errors import (
    CartNotFoundError,
    EmptyCartError,
    EmptyProductStockError,
    LowProductStockError,
    ProductNotFoundError,
    ProductNotInCartError,
)
from app.models.cart import Cart, ProductInCart
from app.models.user import User
from app.repos.cart import CartRepo
from app.schemas import CartOut

logger = logging.getLogger(__name__)


def find_item(cart: Optional[Cart], model: str) -> Optional[ProductInCart]:
    if cart is None:
        return None
    return next((item for item in cart.products if item.model == model), None)

def compute_total(cart: Cart) -> float:
    return round(sum(item.quantity * item.price for item in cart.products), 2)


class CartService:
    """
    Cart use cases for the logged customer, plus the administrative
    listing and bulk deletion. Every mutation commits once at the end.
    """

    def __init__(self, session: Session):
        self.repo = CartRepo(session)

    def get_cart(self, user: User) -> CartOut:
        """Current unpaid cart, or an empty one if the customer has none yet."""
        cart = self.repo.get_unpaid_cart(user.username)
        if cart is None:
            return CartOut(customer=user.username)
        return CartOut.model_validate(cart)

    def add_to_cart(self, user: User, model: str) -> bool:
        product = self.repo.get_product(model)
        if product is None:
            raise ProductNotFoundError()

        cart = self.repo.get_unpaid_cart(user.username)
        item = find_item(cart, model)
        already_in_cart = item.quantity if item else 0
        if product.quantity - already_in_cart <= 0:
            raise EmptyProductStockError()

        if cart is None:
            cart = self.repo.create_cart(user.username)
            logger.info("Created cart %s for %s", cart.id, user.username)

        if item:
            item.quantity += 1
        else:
            cart.products.append(ProductInCart(
                model=product.model,
                category=product.category,
                quantity=1,
                price=product.selling_price,
            ))

        cart.total = compute_total(cart)
        self.repo.save(cart)
        self.repo.commit()

        logger.info("Added %s to cart of %s", model, user.username)
        return True

    def checkout_cart(self, user: User) -> bool:
        cart = self.repo.get_unpaid_cart(user.username)
        if cart is None:
            raise CartNotFoundError()
        if not cart.products:
            raise EmptyCartError()

        products = []
        for item in cart.products:
            product = self.repo.get_product(item.model)
            if product is None:
                raise ProductNotFoundError()
            if product.quantity < item.quantity:
                raise LowProductStockError()
            products.append((product, item.quantity))

        for product, quantity in products:
            product.quantity -= quantity

        cart.paid = True
        cart.payment_date = date.today().isoformat()
        cart.total = compute_total(cart)
        self.repo.save(cart, *(p for p, _ in products))
        self.repo.commit()

        logger.info("Cart of %s checked out", user.username)
        return True

    def get_customer_carts(self, user: User) -> List[CartOut]:
        """Paid carts of the customer, oldest first."""
        return [CartOut.model_validate(c) for c in self.repo.get_paid_carts(user.username)]

    def remove_product_from_cart(self, user: User, model: str) -> bool:
        """Take one unit of `model` out of the current cart."""
        cart = self.repo.get_unpaid_cart(user.username)
        if cart is None:
            raise CartNotFoundError()
        if self.repo.get_product(model) is None:
            raise ProductNotFoundError()

        item = find_item(cart, model)
        if item is None:
            raise ProductNotInCartError()

        if item.quantity > 1:
            item.quantity -= 1
        else:
            cart.products.remove(item)

        cart.total = compute_total(cart)
        self.repo.save(cart)
        self.repo.commit()

        logger.info("Removed one %s from cart of %s", model, user.username)
        return True

    def clear_cart(self, user: User) -> bool:
        cart = self.repo.get_unpaid_cart(user.username)
        if cart is None:
            raise CartNotFoundError()

        cart.products.clear()
        cart.total = 0.0
        self.repo.save(cart)
        self.repo.commit()
        return True

    def delete_all_carts(self) -> bool:
        self.repo.delete_all_carts()
        self.repo.commit()
        logger.warning("All carts deleted")
        return True

    def get_all_carts(self) -> List[CartOut]:
        return [CartOut.model_validate(c) for c in self.repo.get_all_carts()]
