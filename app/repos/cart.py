from typing import List, Optional
from sqlmodel import Session, select, delete

from app.models.cart import Cart, ProductInCart
from app.models.product import Product


class CartRepo:
    """Data access for carts, their lines and the product stock they touch."""

    def __init__(self, session: Session):
        self.session = session

    def get_unpaid_cart(self, customer: str) -> Optional[Cart]:
        return self.session.exec(
            select(Cart).where(Cart.customer == customer, Cart.paid == False)  # noqa: E712
        ).first()

    def get_paid_carts(self, customer: str) -> List[Cart]:
        return self.session.exec(
            select(Cart).where(Cart.customer == customer, Cart.paid == True).order_by(Cart.id)  # noqa: E712
        ).all()

    def get_all_carts(self) -> List[Cart]:
        return self.session.exec(select(Cart).order_by(Cart.id)).all()

    def get_product(self, model: str) -> Optional[Product]:
        return self.session.get(Product, model)

    def create_cart(self, customer: str) -> Cart:
        cart = Cart(customer=customer, paid=False, payment_date=None, total=0.0)
        self.session.add(cart)
        self.session.flush()
        return cart

    def save(self, *rows):
        for row in rows:
            self.session.add(row)

    def delete_all_carts(self):
        # Lines first, they reference the carts
        self.session.exec(delete(ProductInCart))
        self.session.exec(delete(Cart))

    def commit(self):
        self.session.commit()

