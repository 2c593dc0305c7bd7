import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from jobboard.database import get_db
from jobboard.main import app
from jobboard.config import settings
from jobboard.services.session_service import session_manager

ADMIN_USERNAME = "admin@example.com"
ADMIN_PASSWORD = "test-password-123"


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def test_db(tmp_path):
    db_path = tmp_path / "jobboard.sqlite"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    from jobboard.database import init_db
    init_db(db_path)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def admin_settings():
    """Point the admin credentials at test values for the duration of a test."""
    original = (settings.admin_username, settings.admin_password, settings.session_ttl_seconds)
    settings.admin_username = ADMIN_USERNAME
    settings.admin_password = SecretStr(ADMIN_PASSWORD)
    settings.session_ttl_seconds = 3600
    yield settings
    settings.admin_username, settings.admin_password, settings.session_ttl_seconds = original


@pytest.fixture
def admin_credentials(admin_settings):
    return admin_settings.admin_username, admin_settings.admin_password.get_secret_value()


@pytest.fixture
def fresh_sessions():
    session_manager.terminate_all()
    yield session_manager
    session_manager.terminate_all()


@pytest.fixture
def client(test_db, admin_settings, fresh_sessions):
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    r = client.post("/api/auth", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    return client


@pytest.fixture
def job_fields():
    return {
        "title": "Senior Nurse",
        "location": "Lisbon, Portugal",
        "type": "Full-time",
        "salary": "€1,800 / month",
        "category": "Healthcare",
        "requirements": "Nursing degree\n\nThree years of ICU experience\n",
        "deadline": "2025-03-01",
        "vacancy": 4,
        "preferredGender": "Any",
    }
