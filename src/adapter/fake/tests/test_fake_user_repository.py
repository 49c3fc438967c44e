"""Unit tests for FakeUserRepository — verifies Port contract compliance."""

import unittest

from bson import ObjectId

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DataAccessError
from domain.model.user import User


class TestFakeUserRepository(unittest.TestCase):
    """Tests that FakeUserRepository correctly implements UserRepository Protocol."""

    def setUp(self):
        self.repo = FakeUserRepository()

    # ── create + get_by_id (round-trip) ───────────────────────

    def test_create_and_get_by_id(self):
        user = self.repo.create(email='a@b.com', full_name='Ada')

        self.assertIsInstance(user, User)
        self.assertTrue(ObjectId.is_valid(user.id))
        self.assertEqual(self.repo.get_by_id(user.id), user)

    def test_get_by_id_returns_none_for_missing(self):
        self.assertIsNone(self.repo.get_by_id(str(ObjectId())))

    def test_returned_user_is_a_copy(self):
        user = self.repo.create(email='a@b.com')
        user.email = 'changed@b.com'

        self.assertEqual(self.repo.get_by_id(user.id).email, 'a@b.com')

    # ── update ────────────────────────────────────────────────

    def test_update_applies_fields(self):
        user = self.repo.create(email='a@b.com')

        updated = self.repo.update(user.id, {'full_name': 'Ada'})

        self.assertEqual(updated.full_name, 'Ada')
        self.assertEqual(updated.email, 'a@b.com')

    def test_update_returns_none_for_missing(self):
        self.assertIsNone(self.repo.update(str(ObjectId()), {'full_name': 'Ada'}))

    # ── delete ────────────────────────────────────────────────

    def test_delete_removes_user(self):
        user = self.repo.create(email='a@b.com')

        self.assertEqual(self.repo.delete(user.id).id, user.id)
        self.assertEqual(self.repo.find_all(), [])
        self.assertIsNone(self.repo.delete(user.id))

    # ── failure injection ─────────────────────────────────────

    def test_fail_with_raises_data_access_error(self):
        self.repo.fail_with = TimeoutError("timed out")

        with self.assertRaises(DataAccessError):
            self.repo.find_all()


if __name__ == '__main__':
    unittest.main()
