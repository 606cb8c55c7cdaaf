import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"
os.environ["ENVIRONMENT"] = "development"

import uuid
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from livefit.core.config import get_settings

get_settings.cache_clear()

from livefit.core.security import create_access_token, get_password_hash
from livefit.db.base import Base
from livefit.db.session import get_db
from livefit.main import app
from livefit.models import Coach, Skill, User, UserRole


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(session_factory):
    with session_factory() as session:
        yield session
        session.rollback()


@pytest.fixture()
def client(session_factory):
    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db_session: Session):
    def _make_user(
        name: str = "Amy",
        email: str | None = None,
        password: str = "Abcd1234",
        role: UserRole = UserRole.USER,
    ) -> User:
        user = User(
            name=name,
            email=email or f"{uuid.uuid4().hex[:10]}@example.com",
            password=get_password_hash(password),
            role=role,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def make_coach(db_session: Session, make_user):
    def _make_coach(name: str = "Coach", created_at: datetime | None = None) -> Coach:
        user = make_user(name=name, role=UserRole.COACH)
        coach = Coach(
            user_id=user.id,
            experience_years=3,
            description="Certified trainer",
            profile_image_url="https://example.com/avatar.png",
            created_at=created_at or datetime.utcnow(),
        )
        db_session.add(coach)
        db_session.commit()
        db_session.refresh(coach)
        return coach

    return _make_coach


@pytest.fixture()
def make_skill(db_session: Session):
    def _make_skill(name: str = "重訓") -> Skill:
        skill = Skill(name=name)
        db_session.add(skill)
        db_session.commit()
        db_session.refresh(skill)
        return skill

    return _make_skill


@pytest.fixture()
def auth_headers():
    settings = get_settings()

    def _auth_headers(user: User, expires_delta: timedelta = timedelta(days=1)) -> dict:
        token = create_access_token(
            user.id, settings.jwt_secret_key, settings.jwt_algorithm, expires_delta
        )
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
