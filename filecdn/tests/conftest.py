import pytest
from fastapi.testclient import TestClient

from filecdn.database import Catalog, get_catalog
from filecdn.main import app
from filecdn.services import account_service
from filecdn.services.file_storage import FileStorage, get_storage

DATABASE_URL = "sqlite://"


@pytest.fixture
def catalog():
    testing_catalog = Catalog(DATABASE_URL)
    testing_catalog.create_tables()
    yield testing_catalog
    testing_catalog.drop_tables()
    testing_catalog.dispose()


@pytest.fixture
def storage(tmp_path):
    return FileStorage(tmp_path / "files")


@pytest.fixture
def client(catalog, storage):
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_token(catalog):
    return account_service.register(catalog, "user", "user@example.com", "password")


@pytest.fixture
def auth_headers(user_token):
    return {"Authorization": f"Bearer {user_token}"}
