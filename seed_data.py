from sqlmodel import Session, select
from app.core.security import get_password_hash
from app.db.session import engine, create_db_and_tables
from app.models.product import Product, Category
from app.models.user import User, Role

def seed_users(session: Session):
    existing_users = session.exec(select(User)).all()
    if existing_users:
        print(f"Database already contains {len(existing_users)} users. Skipping users.")
        return

    print("Seeding demo users...")
    for role in Role:
        username = role.value.lower()
        session.add(User(
            username=username,
            name=role.value,
            surname="Demo",
            password_hash=get_password_hash(username),
            role=role
        ))

def seed_products(session: Session):
    existing_products = session.exec(select(Product)).all()
    if existing_products:
        print(f"Database already contains {len(existing_products)} products. Skipping products.")
        return

    print("Seeding initial products...")
    products = [
        Product(
            model="iPhone13",
            category=Category.SMARTPHONE,
            selling_price=799.00,
            quantity=20,
            arrival_date="2024-01-10",
            details="128GB, Midnight"
        ),
        Product(
            model="GalaxyS22",
            category=Category.SMARTPHONE,
            selling_price=649.99,
            quantity=15,
            arrival_date="2024-02-01",
            details="256GB, Phantom Black"
        ),
        Product(
            model="ThinkPadX1",
            category=Category.LAPTOP,
            selling_price=1899.00,
            quantity=5,
            arrival_date="2024-03-05",
            details="14 inch, 16GB RAM"
        ),
        Product(
            model="WashMaster3000",
            category=Category.APPLIANCE,
            selling_price=499.00,
            quantity=0,
            arrival_date="2023-11-20",
            details="Front-load washing machine, out of stock"
        )
    ]

    for product in products:
        session.add(product)

if __name__ == "__main__":
    print("Creating database and tables...")
    create_db_and_tables()

    with Session(engine) as session:
        seed_users(session)
        seed_products(session)
        session.commit()
        print("Seeding done. Demo users log in with their username as password.")
