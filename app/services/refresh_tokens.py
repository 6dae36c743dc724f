"""Server-side record of the single refresh token each account may use."""

from app.core.security import hash_secret, verify_secret
from app.repositories.user import UserRepository


class RefreshTokenStore:
    """Keeps a bcrypt hash of the latest refresh token in users.hashed_refresh_token."""

    def __init__(self, users: UserRepository) -> None:
        self.users = users

    def save(self, account_id: str, raw_token: str) -> None:
        """Hash and store the token, replacing (and so revoking) any previous one."""
        self.users.update_refresh_token_hash(account_id, hash_secret(raw_token))

    def clear(self, account_id: str) -> None:
        self.users.update_refresh_token_hash(account_id, None)

    def matches(self, account_id: str, raw_token: str) -> bool:
        user = self.users.get(account_id)
        if user is None or not user.hashed_refresh_token:
            return False
        return verify_secret(raw_token, user.hashed_refresh_token)
