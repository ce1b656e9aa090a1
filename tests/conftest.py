import pytest
from fastapi.testclient import TestClient

from roster.core import config
from roster.database import Database
from roster.main import create_app


@pytest.fixture(autouse=True)
def roster_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    # Lowest bcrypt cost keeps the suite fast.
    monkeypatch.setattr(config, 'BCRYPT_ROUNDS', 4)
    monkeypatch.setattr(config, 'JWT_SECRET_KEY', 'test-secret-key-that-is-long-enough-for-hs256')
    monkeypatch.setattr(config, 'JWT_ALGORITHM', 'HS256')
    monkeypatch.setattr(config, 'JWT_EXPIRES_MINUTES', 10080)


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'students.db'}")
    db.create_schema()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(database):
    with TestClient(create_app(database)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    def _auth_headers(name: str, email: str, password: str = 'secret1') -> dict:
        response = client.post('/api/auth/register', json={'name': name, 'email': email, 'password': password})
        assert response.status_code == 201
        response = client.post('/api/auth/login', json={'email': email, 'password': password})
        assert response.status_code == 200
        return {'Authorization': f"Bearer {response.json()['token']}"}

    return _auth_headers
