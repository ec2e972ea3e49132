import unittest
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from exercise_tracker_api.app.core.errors import UserNotFoundError
from exercise_tracker_api.app.core.store import ExerciseRecord, UserRegistry


class UserRegistryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = UserRegistry()

    def test_ids_are_sequential_strings(self) -> None:
        first = self.registry.create_user("alice")
        second = self.registry.create_user("alice")
        self.assertEqual((first.id, second.id), ("1", "2"))
        self.assertEqual(len(self.registry), 2)
        self.assertEqual([u.id for u in self.registry.list_users()], ["1", "2"])

    def test_add_exercise_appends_in_order(self) -> None:
        user = self.registry.create_user("bob")
        run = ExerciseRecord(description="run", duration=30, date=date(1990, 1, 1))
        swim = ExerciseRecord(description="swim", duration=45, date=date(1989, 6, 1))
        self.registry.add_exercise(user.id, run)
        self.registry.add_exercise(user.id, swim)
        _, log = self.registry.snapshot_log(user.id)
        self.assertEqual(log, [run, swim])

    def test_snapshot_is_a_copy(self) -> None:
        user = self.registry.create_user("carol")
        _, log = self.registry.snapshot_log(user.id)
        log.append(ExerciseRecord(description="x", duration=1, date=date(2000, 1, 1)))
        _, again = self.registry.snapshot_log(user.id)
        self.assertEqual(again, [])

    def test_unknown_user(self) -> None:
        self.assertIsNone(self.registry.get_user("42"))
        with self.assertRaises(UserNotFoundError):
            self.registry.snapshot_log("42")
        with self.assertRaises(UserNotFoundError):
            self.registry.add_exercise("42", ExerciseRecord(description="x", duration=1, date=date(2000, 1, 1)))

    def test_concurrent_creation_yields_unique_ids(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            users = list(pool.map(lambda i: self.registry.create_user(f"user{i}"), range(200)))
        ids = [u.id for u in users]
        self.assertEqual(len(set(ids)), 200)
        self.assertEqual(sorted(int(i) for i in ids), list(range(1, 201)))


if __name__ == "__main__":
    unittest.main()
