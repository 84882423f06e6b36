"""Tests for roster.services.bootstrap.seed_defaults against an in-memory SQLite database."""

import unittest

from roster.core.database import build_engine, build_session_factory
from roster.core.security import verify_password
from roster.models import Base, Role, RoleName, User
from roster.services.bootstrap import seed_defaults
from support import make_settings


class TestSeedDefaults(unittest.TestCase):
    """Seeding creates two roles and two accounts once, and never modifies existing rows."""

    def setUp(self) -> None:
        engine = build_engine(make_settings())
        Base.metadata.create_all(bind=engine)
        self.addCleanup(engine.dispose)
        self.db = build_session_factory(engine)()
        self.addCleanup(self.db.close)

    def test_first_run_creates_roles_and_accounts(self) -> None:
        result = seed_defaults(self.db, rounds=4)
        self.assertEqual(result.roles_created, ["ROLE_ADMIN", "ROLE_USER"])
        self.assertEqual(result.users_created, ["admin", "user"])

        admin = self.db.query(User).filter(User.username == "admin").one()
        self.assertEqual(admin.role.name, RoleName.ADMIN.value)
        self.assertTrue(verify_password("admin", admin.password))
        user = self.db.query(User).filter(User.username == "user").one()
        self.assertEqual(user.role.name, RoleName.USER.value)
        self.assertTrue(verify_password("user", user.password))

    def test_second_run_is_a_no_op(self) -> None:
        seed_defaults(self.db, rounds=4)
        result = seed_defaults(self.db, rounds=4)
        self.assertEqual(result.roles_created, [])
        self.assertEqual(result.users_created, [])
        self.assertEqual(self.db.query(Role).filter(Role.name == "ROLE_ADMIN").count(), 1)
        self.assertEqual(self.db.query(Role).filter(Role.name == "ROLE_USER").count(), 1)
        self.assertEqual(self.db.query(User).filter(User.username == "admin").count(), 1)
        self.assertEqual(self.db.query(User).filter(User.username == "user").count(), 1)

    def test_existing_account_is_left_untouched(self) -> None:
        seed_defaults(self.db, rounds=4)
        admin = self.db.query(User).filter(User.username == "admin").one()
        original_hash = admin.password
        seed_defaults(self.db, rounds=4)
        self.db.refresh(admin)
        self.assertEqual(admin.password, original_hash)


class TestRoleName(unittest.TestCase):
    """RoleName maps persisted strings to a closed set of members."""

    def test_known_names(self) -> None:
        self.assertIs(RoleName.from_persisted("ROLE_ADMIN"), RoleName.ADMIN)
        self.assertIs(RoleName.from_persisted("ROLE_USER"), RoleName.USER)

    def test_unknown_names_map_to_none(self) -> None:
        for name in ("role_admin", "ROLE_ADMIN ", "ROLE_EDITOR", "", None):
            with self.subTest(name=name):
                self.assertIsNone(RoleName.from_persisted(name))


if __name__ == "__main__":
    unittest.main()
