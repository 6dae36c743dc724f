"""Persistence adapters over an explicitly passed SQLAlchemy session."""

from app.repositories.user import UserRepository

__all__ = ["UserRepository"]
