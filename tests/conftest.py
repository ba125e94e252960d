"""Pytest configuration and fixtures."""

import io

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.models.lecture_summary import LectureSummary  # noqa: F401
from app.models.user import User  # noqa: F401
from app.services import blob_store as blob_store_module
from app.services.auth import AuthService
from app.services.blob_store import LocalBlobStore
from app.services.principal import Principal, get_principal_resolver

STUDENT = Principal(id=1, role="student", registration_number="123456789")
TEACHER = Principal(id=2, role="teacher", registration_number="TECH001")
PARENT = Principal(id=3, role="parent", registration_number="PAR001")
OTHER_TEACHER = Principal(id=4, role="teacher", registration_number="TECH002")


class StaticPrincipalResolver:
    """Fixed credential table standing in for real token verification."""

    def __init__(self, table: dict[str, Principal]) -> None:
        self.table = table

    def resolve(self, token: str) -> Principal | None:
        return self.table.get(token)


CREDENTIALS = {
    "student-token": STUDENT,
    "teacher-token": TEACHER,
    "parent-token": PARENT,
    "other-teacher-token": OTHER_TEACHER,
}


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def upload_lecture(client: TestClient, token: str = "teacher-token", filename: str = "lecture.mp3", **form):
    """POST a small MP3 upload and return the response."""
    return client.post(
        "/api/lecture-summaries/upload",
        files={"audio": (filename, io.BytesIO(b"\x00" * 256), "audio/mpeg")},
        data=form,
        headers=auth_headers(token),
    )


@pytest.fixture(name="db_session")
def db_session_fixture():
    """Create an in-memory SQLite database for tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(name="blob_store")
def blob_store_fixture(tmp_path):
    """Point the blob store at a temporary upload directory."""
    store = LocalBlobStore(str(tmp_path / "uploads"), "/uploads", max_upload_size_mb=1)
    blob_store_module._blob_store = store
    yield store
    blob_store_module._blob_store = None


def _make_client(db_session: Session, resolver=None):
    from app.rate_limit import limiter
    from main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    if resolver is not None:
        app.dependency_overrides[get_principal_resolver] = lambda: resolver
    limiter.enabled = False
    with TestClient(app) as c:
        yield c
    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture(name="client")
def client_fixture(db_session: Session, blob_store: LocalBlobStore):
    """Test client whose callers are resolved from the static credential table."""
    yield from _make_client(db_session, StaticPrincipalResolver(CREDENTIALS))


@pytest.fixture(name="jwt_client")
def jwt_client_fixture(db_session: Session, blob_store: LocalBlobStore):
    """Test client using the production JWT resolver."""
    yield from _make_client(db_session)


@pytest.fixture(name="test_teacher")
def test_teacher_fixture(db_session: Session):
    """Register a teacher account and return (account data, token)."""
    from app.services.jwt import get_jwt_service

    result = AuthService().register(db_session, "tech100", "password123", "teacher", "Ada Lovelace")
    token = get_jwt_service().create_token(
        user_id=result.user_id,
        role=result.role,
        registration_number=result.registration_number,
        display_name=result.display_name,
    )
    return {
        "user_id": result.user_id,
        "registration_number": result.registration_number,
        "token": token,
    }
