"""Shared fixtures: an in-memory slot store, a loaded workspace and an API client."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_catalog.auth import make_guest
from inventory_catalog.database import Base
from inventory_catalog.main import create_app
from inventory_catalog.models import StorageSlot  # noqa: F401 - registers the table
from inventory_catalog.schemas.item import ItemCreate
from inventory_catalog.schemas.user import UserCreate, UserPermissions
from inventory_catalog.services.store import SlotStore
from inventory_catalog.services.users import UserRegistry
from inventory_catalog.services.workspace import Workspace


def memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def session_factory():
    engine = memory_engine()
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def store(session_factory):
    return SlotStore(session_factory)


@pytest.fixture
def workspace(store):
    ws = Workspace(store)
    ws.load()
    return ws


@pytest.fixture
def admin(workspace):
    return workspace.users[0]


@pytest.fixture
def viewer(workspace, admin):
    """A registered user with no permissions at all."""
    return UserRegistry(workspace).add(
        admin, UserCreate(username="viewer", password="secret", permissions=UserPermissions())
    )


@pytest.fixture
def guest():
    return make_guest("visitor")


@pytest.fixture
def client(workspace):
    with TestClient(create_app(workspace)) as test_client:
        yield test_client


def make_item(**overrides) -> ItemCreate:
    data = {
        "name": "Classic cap",
        "type": "كلاسيكية",
        "image": "data:image/png;base64,iVBORw0KGgo=",
        "price": 10,
        "model": "SAM-01",
        "barcode": "123456",
        "category": "قبعات",
        "size": "M",
        "color": "أسود",
        "material": "قطن",
        "country": "تركيا",
        "description": "",
    }
    data.update(overrides)
    return ItemCreate(**data)


def login(client, username, password):
    """Log in and return the bearer headers."""
    response = client.post("/api/auth/login", data={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
