import os
from datetime import timedelta
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker

# CRITICAL: Set test configuration BEFORE importing any zentro modules
# so zentro.database never connects to a real Supabase database
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["TESTING"] = "true"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")

from zentro.main import app
from zentro.database import Base
import zentro.database as db_module
from zentro import dependencies
from zentro.models.admin_user import AdminUser
from zentro.services.auth_service import create_access_token, get_password_hash
from zentro.services.media_manager import MediaManager
from zentro.services.storage import StorageError

PUBLIC_URL_PREFIX = "https://test-project.supabase.co/storage/v1/object/public"


class FakeStorage:
    """In-memory object store with switchable failures."""

    def __init__(self):
        self.blobs = {}
        self.fail_upload = False
        self.fail_remove = False
        self.upload_calls = []

    def upload(self, bucket, path, data, content_type, cache_control="3600", upsert=False):
        self.upload_calls.append(
            {
                "bucket": bucket,
                "path": path,
                "content_type": content_type,
                "cache_control": cache_control,
                "upsert": upsert,
            }
        )
        if self.fail_upload:
            raise StorageError("simulated upload failure")
        if not upsert and (bucket, path) in self.blobs:
            raise StorageError("The resource already exists")
        self.blobs[(bucket, path)] = data

    def get_public_url(self, bucket, path):
        return f"{PUBLIC_URL_PREFIX}/{bucket}/{path}"

    def remove(self, bucket, paths):
        if self.fail_remove:
            raise StorageError("simulated remove failure")
        for path in paths:
            self.blobs.pop((bucket, path), None)

    def has(self, bucket, path):
        return (bucket, path) in self.blobs


@pytest.fixture(scope="session")
def test_engine():
    return create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # share same in-memory DB across connections
    )


@pytest.fixture()
def testing_session_local(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture()
def db_session(test_engine, testing_session_local):
    # Fresh schema per test to avoid cross-test data
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)

    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def fake_storage():
    return FakeStorage()


@pytest.fixture()
def media_manager(fake_storage):
    return MediaManager(fake_storage)


@pytest.fixture(autouse=True)
def patch_sessionlocal(monkeypatch, test_engine, testing_session_local, db_session):
    monkeypatch.setattr(db_module, "engine", test_engine, raising=True)
    monkeypatch.setattr(db_module, "SessionLocal", testing_session_local, raising=True)

    def test_get_db():
        db = testing_session_local()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[dependencies.get_db] = test_get_db

    # Disable rate limiter globally for tests
    app.state.limiter.enabled = False
    yield
    app.dependency_overrides.pop(dependencies.get_db, None)


@pytest.fixture()
def client(media_manager):
    app.dependency_overrides[dependencies.get_media_manager] = lambda: media_manager
    yield TestClient(app)
    app.dependency_overrides.pop(dependencies.get_media_manager, None)


@pytest.fixture()
def admin_user(db_session):
    admin = AdminUser(
        email="admin@zentrohomes.com",
        name="Admin User",
        password_hash=get_password_hash("zentro2025"),
        role="admin",
        is_active=True,
    )
    db_session.add(admin)
    db_session.commit()
    db_session.refresh(admin)
    return admin


@pytest.fixture()
def admin_headers(admin_user):
    token = create_access_token(
        admin_user.email, admin_user.id, admin_user.role, timedelta(minutes=30)
    )
    return {"Authorization": f"Bearer {token}"}
