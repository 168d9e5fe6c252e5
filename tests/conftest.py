"""Shared test fixtures"""
import pytest
from fastapi.testclient import TestClient

from auth import repository as auth_repository
from auth import security
from core.settings import Settings
from main import create_app
from products import repository as products_repository
from products.repository import build_partial_update

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnop"


class FakeUserStore:
    """In-memory stand-in for the users table"""

    def __init__(self):
        self.users = {}
        self._next_id = 1

    async def create_user(self, *, username, password_hash):
        if username in self.users:
            raise auth_repository.DuplicateUsername(username)
        row = {"user_id": self._next_id, "username": username, "password": password_hash}
        self.users[username] = row
        self._next_id += 1
        return {"user_id": row["user_id"], "username": username}

    async def get_user_by_username(self, username):
        row = self.users.get(username)
        return dict(row) if row is not None else None


class FakeProductStore:
    """In-memory stand-in for the products table"""

    def __init__(self):
        self.rows = {}
        self._next_id = 1

    async def list_products(self):
        return [dict(row) for _, row in sorted(self.rows.items())]

    async def create_product(self, *, product_name, description, quantity, price):
        row = {
            "productID": self._next_id,
            "productName": product_name,
            "description": description,
            "quantity": quantity,
            "price": price,
        }
        self.rows[self._next_id] = row
        self._next_id += 1
        return dict(row)

    async def replace_product(self, product_id, *, product_name, description, quantity, price):
        if product_id not in self.rows:
            return False
        self.rows[product_id].update(
            productName=product_name,
            description=description,
            quantity=quantity,
            price=price,
        )
        return True

    async def update_product_fields(self, product_id, fields):
        # Same argument checks as the SQL path.
        build_partial_update(fields, product_id)
        if product_id not in self.rows:
            return False
        self.rows[product_id].update(fields)
        return True

    async def delete_product(self, product_id):
        return self.rows.pop(product_id, None) is not None


@pytest.fixture
def settings():
    """Settings with a fixed secret and cheap bcrypt rounds"""
    return Settings(jwt_secret=TEST_SECRET, bcrypt_rounds=4, init_schema=False)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def user_store(monkeypatch):
    store = FakeUserStore()
    monkeypatch.setattr(auth_repository, "create_user", store.create_user)
    monkeypatch.setattr(auth_repository, "get_user_by_username", store.get_user_by_username)
    return store


@pytest.fixture
def product_store(monkeypatch):
    store = FakeProductStore()
    for name in (
        "list_products",
        "create_product",
        "replace_product",
        "update_product_fields",
        "delete_product",
    ):
        monkeypatch.setattr(products_repository, name, getattr(store, name))
    return store


@pytest.fixture
def auth_headers(settings):
    """Authorization header carrying a valid token for user 1"""
    token = security.issue_token(settings, user_id=1, username="alice")
    return {"Authorization": f"Bearer {token}"}
