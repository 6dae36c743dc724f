"""UserService: registration, OCR registration and admin mutations."""

import unittest

from app.core.security import verify_secret
from app.models import Role
from app.repositories.user import UserRepository
from app.schemas.user import UserCreate
from app.services.errors import ConflictError, NotFoundError
from app.services.users import PLACEHOLDER_EMAIL_DOMAIN, UserService
from tests.helpers import add_user, make_session


class UserServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.session = make_session()
        self.users = UserRepository(self.session)
        self.service = UserService(self.users)

    def tearDown(self) -> None:
        self.session.close()


class TestRegister(UserServiceTestCase):
    def _body(self, **overrides: str) -> UserCreate:
        data = {
            "nik": "123",
            "name": "John",
            "email": "john@mediq.com",
            "password": "secret1",
        }
        data.update(overrides)
        return UserCreate(**data)

    def test_register_hashes_password_and_defaults_to_patient(self) -> None:
        account = self.service.register(self._body())
        self.assertEqual(account.role, Role.PASIEN)
        stored = self.users.get(account.id)
        self.assertTrue(verify_secret("secret1", stored.password_hash))
        self.assertNotIn("password_hash", account.model_dump())

    def test_duplicate_email_or_nik_conflicts(self) -> None:
        self.service.register(self._body())
        with self.assertRaises(ConflictError):
            self.service.register(self._body(nik="456"))
        with self.assertRaises(ConflictError):
            self.service.register(self._body(email="other@mediq.com"))


class TestRegisterFromOcr(UserServiceTestCase):
    def test_existing_nik_returns_existing_account(self) -> None:
        user = add_user(self.users, nik="999")
        account = self.service.register_from_ocr("999", "Someone Else")
        self.assertEqual(account.id, user.id)
        self.assertEqual(len(self.users.list_all()), 1)

    def test_new_nik_creates_placeholder_account(self) -> None:
        account = self.service.register_from_ocr("111", "Y")
        self.assertEqual(account.email, f"111@{PLACEHOLDER_EMAIL_DOMAIN}")
        self.assertEqual(account.name, "Y")
        self.assertIsNotNone(self.users.get(account.id).password_hash)


class TestLookupsAndAdminMutations(UserServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user = add_user(self.users, nik="777")

    def test_nik_checks(self) -> None:
        self.assertTrue(self.service.is_nik_registered("777"))
        self.assertFalse(self.service.is_nik_registered("000"))
        self.assertEqual(self.service.find_by_nik("777").id, self.user.id)
        with self.assertRaises(NotFoundError):
            self.service.find_by_nik("000")

    def test_profile_and_list(self) -> None:
        self.assertEqual(self.service.get_profile(self.user.id).nik, "777")
        self.assertEqual([a.id for a in self.service.list_users()], [self.user.id])
        with self.assertRaises(NotFoundError):
            self.service.get_profile("missing")

    def test_update_role(self) -> None:
        account = self.service.update_role(self.user.id, Role.OPERATOR)
        self.assertEqual(account.role, Role.OPERATOR)
        with self.assertRaises(NotFoundError):
            self.service.update_role("missing", Role.OPERATOR)

    def test_delete(self) -> None:
        user_id = self.user.id
        message = self.service.delete(user_id)
        self.assertEqual(message, f"User with id {user_id} deleted successfully")
        with self.assertRaises(NotFoundError):
            self.service.delete(user_id)
