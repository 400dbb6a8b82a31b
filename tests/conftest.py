import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from order_service.api.dependencies import get_product_client, get_user_client
from order_service.clients.product_client import ProductClient
from order_service.clients.user_client import UserClient
from order_service.infrastructure.database import Base as OrderBase, get_db as get_order_db
from order_service.main import app as order_app
from product_service.infrastructure.database import Base as ProductBase, get_db as get_product_db
from product_service.main import app as product_app
from user_service.infrastructure.database import Base as UserBase, get_db as get_user_db
from user_service.main import app as user_app

# Register every model on its metadata
import order_service.domain.models  # noqa: F401,E402
import product_service.domain.models  # noqa: F401,E402
import user_service.domain.models  # noqa: F401,E402


def _memory_sessionmaker(base):
    """Create an in-memory database shared across threads"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    base.metadata.create_all(engine)
    return engine, sessionmaker(bind=engine, autoflush=False)


def _override_get_db(SessionLocal):
    def get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()
    return get_db


@pytest.fixture
def product_sessionmaker():
    engine, SessionLocal = _memory_sessionmaker(ProductBase)
    yield SessionLocal
    engine.dispose()


@pytest.fixture
def user_sessionmaker():
    engine, SessionLocal = _memory_sessionmaker(UserBase)
    yield SessionLocal
    engine.dispose()


@pytest.fixture
def order_sessionmaker():
    engine, SessionLocal = _memory_sessionmaker(OrderBase)
    yield SessionLocal
    engine.dispose()


@pytest.fixture
def product_db(product_sessionmaker):
    session = product_sessionmaker()
    yield session
    session.close()


@pytest.fixture
def user_db(user_sessionmaker):
    session = user_sessionmaker()
    yield session
    session.close()


@pytest.fixture
def order_db(order_sessionmaker):
    session = order_sessionmaker()
    yield session
    session.close()


@pytest.fixture
def product_api(product_sessionmaker):
    product_app.dependency_overrides[get_product_db] = _override_get_db(product_sessionmaker)
    yield TestClient(product_app)
    product_app.dependency_overrides.clear()


@pytest.fixture
def user_api(user_sessionmaker):
    user_app.dependency_overrides[get_user_db] = _override_get_db(user_sessionmaker)
    yield TestClient(user_app)
    user_app.dependency_overrides.clear()


@pytest.fixture
def order_api(order_sessionmaker, product_api, user_api):
    """Order service wired to the in-process product and user services"""
    product_client = ProductClient("http://testserver", http_client=product_api)
    user_client = UserClient("http://testserver", http_client=user_api)

    order_app.dependency_overrides[get_order_db] = _override_get_db(order_sessionmaker)
    order_app.dependency_overrides[get_product_client] = lambda: product_client
    order_app.dependency_overrides[get_user_client] = lambda: user_client
    yield TestClient(order_app)
    order_app.dependency_overrides.clear()
