import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from slidr.crud.project import ProjectStore
from slidr.crud.user import UserStore
from slidr.database.database import create_tables, enable_sqlite_foreign_keys, get_db
from slidr.main import create_app
from slidr.services.auth import AuthService
from slidr.services.project import ProjectService


@pytest.fixture(scope="function")
def engine():
    """In-memory SQLite shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    enable_sqlite_foreign_keys(engine)
    create_tables(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture(scope="function")
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def users(db):
    return UserStore(db)


@pytest.fixture
def projects(db):
    return ProjectStore(db)


@pytest.fixture
def auth_service(users):
    return AuthService(users)


@pytest.fixture
def project_service(projects, users):
    return ProjectService(projects, users)


@pytest.fixture(scope="function")
def app(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(app):
    return TestClient(app)


@pytest.fixture
def signup(client):
    """Register a user over HTTP and return the response payload."""

    def _signup(email="a@x.com", password="p1", first_name="Ada", last_name="Lovelace"):
        response = client.post(
            "/api/auth/signup",
            json={
                "firstName": first_name,
                "lastName": last_name,
                "email": email,
                "password": password,
            },
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _signup
