"""User store: lookups and single-row updates on the users table."""

from typing import Any

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import Role, User


class UserRepository:
    """
    Thin persistence layer for :class:`User`.

    Each write commits on its own, so a single-field update is atomic per row.
    It never issues tokens or hashes secrets; that is the service layer's job.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    # Lookups

    def get(self, user_id: str) -> User | None:
        return self.session.get(User, user_id)

    def find_by_email(self, email: str) -> User | None:
        return self.session.query(User).filter(User.email == email).first()

    def find_by_nik(self, nik: str) -> User | None:
        return self.session.query(User).filter(User.nik == nik).first()

    def find_by_nik_and_name(self, nik: str, name: str) -> User | None:
        """Exact NIK match plus a case-insensitive name comparison."""
        user = self.find_by_nik(nik)
        if user is None or user.name is None:
            return None
        if user.name.casefold() != name.casefold():
            return None
        return user

    def find_by_email_or_nik(self, email: str | None, nik: str | None) -> User | None:
        conditions = []
        if email:
            conditions.append(User.email == email)
        if nik:
            conditions.append(User.nik == nik)
        if not conditions:
            return None
        return self.session.query(User).filter(or_(*conditions)).first()

    def list_all(self) -> list[User]:
        return self.session.query(User).order_by(User.created_at, User.id).all()

    # Writes

    def create(self, **fields: Any) -> User:
        """Insert a row. Raises IntegrityError (after rolling back) on a unique clash."""
        user = User(**fields)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        self.session.refresh(user)
        return user

    def update_refresh_token_hash(self, user_id: str, hashed: str | None) -> User | None:
        """Set or clear the stored refresh-token hash. Returns None for unknown ids."""
        user = self.get(user_id)
        if user is None:
            return None
        user.hashed_refresh_token = hashed
        self.session.commit()
        return user

    def update_role(self, user_id: str, role: Role) -> User | None:
        """Change only the role column. Returns None for unknown ids."""
        user = self.get(user_id)
        if user is None:
            return None
        user.role = role
        self.session.commit()
        self.session.refresh(user)
        return user

    def delete(self, user_id: str) -> bool:
        user = self.get(user_id)
        if user is None:
            return False
        self.session.delete(user)
        self.session.commit()
        return True
