"""
Shared fixtures: an in-memory database injected into the app, the three
demo users (one per role) and a logged-in TestClient for each of them.
"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

from app.core.security import get_password_hash
from app.db.session import get_session
from app.main import app
from app.models.product import Product, Category
from app.models.user import User, Role

BASE_URL = "/ezelectronics"
PASSWORD = "test"


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(autouse=True)
def override_session(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    yield
    app.dependency_overrides.clear()


@pytest.fixture(name="users")
def users_fixture(session: Session) -> dict:
    """One user per role, username is the lowercase role name."""
    password_hash = get_password_hash(PASSWORD)
    users = {
        role: User(
            username=role.value.lower(),
            name="test",
            surname="test",
            password_hash=password_hash,
            role=role,
        )
        for role in Role
    }
    for user in users.values():
        session.add(user)
    session.commit()
    for user in users.values():
        session.refresh(user)
    return users


@pytest.fixture(name="products")
def products_fixture(session: Session) -> dict:
    products = {
        "iPhone13": Product(model="iPhone13", category=Category.SMARTPHONE, selling_price=200.0, quantity=2),
        "ThinkPad": Product(model="ThinkPad", category=Category.LAPTOP, selling_price=1000.0, quantity=0),
        "Fridge": Product(model="Fridge", category=Category.APPLIANCE, selling_price=500.5, quantity=5),
    }
    for product in products.values():
        session.add(product)
    session.commit()
    return products


def login(username: str) -> TestClient:
    client = TestClient(app)
    response = client.post(f"{BASE_URL}/sessions", json={"username": username, "password": PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def client() -> TestClient:
    """Anonymous client, no session cookie."""
    return TestClient(app)


@pytest.fixture
def customer_client(users) -> TestClient:
    return login("customer")


@pytest.fixture
def admin_client(users) -> TestClient:
    return login("admin")


@pytest.fixture
def manager_client(users) -> TestClient:
    return login("manager")
