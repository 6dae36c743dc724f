"""Shared test helpers: an in-memory SQLite user store and account factories."""

from datetime import UTC, datetime

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import hash_secret
from app.models import Base, Role, User
from app.repositories.user import UserRepository


class FixedClock:
    """Callable clock for AuthService(now=...) that tests can move forward."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime.now(UTC)

    def __call__(self) -> datetime:
        return self.current


def make_session() -> Session:
    """Fresh in-memory database with the users table; shared across threads for TestClient."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False)()


def add_user(
    users: UserRepository,
    *,
    name: str = "John Doe",
    email: str | None = "john@mediq.com",
    nik: str | None = "3204123456780001",
    password: str | None = "password123",
    role: Role = Role.PASIEN,
) -> User:
    return users.create(
        name=name,
        email=email,
        nik=nik,
        password_hash=hash_secret(password) if password else None,
        role=role,
    )