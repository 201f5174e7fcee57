import json
import tempfile
import unittest
from pathlib import Path

from mealplan.infra.Json_Store import JsonStore


class TestJsonStore(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "store.json"
        self.store = JsonStore(self.path)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file_reads_as_empty_document(self):
        doc = self.store.read()
        self.assertEqual(doc["users"], [])
        self.assertEqual(doc["next_ids"]["meal_plans"], 1)

    def test_transaction_persists_on_success(self):
        with self.store.transaction() as doc:
            doc["users"].append({"id": JsonStore.next_id(doc, "users"), "username": "a"})
        with open(self.path, encoding="utf-8") as f:
            saved = json.load(f)
        self.assertEqual(saved["users"], [{"id": 1, "username": "a"}])
        self.assertEqual(saved["next_ids"]["users"], 2)

    def test_transaction_rolls_back_on_error(self):
        with self.store.transaction() as doc:
            doc["users"].append({"id": 1, "username": "a"})
        with self.assertRaises(RuntimeError):
            with self.store.transaction() as doc:
                doc["users"].append({"id": 2, "username": "b"})
                raise RuntimeError("boom")
        self.assertEqual([u["username"] for u in self.store.read()["users"]], ["a"])

    def test_nested_transaction_commits_with_outer(self):
        with self.store.transaction() as outer:
            with self.store.transaction() as inner:
                self.assertIs(inner, outer)
                inner["users"].append({"id": 1, "username": "a"})
            self.assertFalse(self.path.exists())
            self.assertEqual(len(self.store.read()["users"]), 1)
        self.assertTrue(self.path.exists())

    def test_no_temp_files_left_behind(self):
        with self.store.transaction() as doc:
            doc["users"].append({"id": 1, "username": "a"})
        leftovers = [p.name for p in Path(self._tmp.name).iterdir() if p.name.startswith(".store_")]
        self.assertEqual(leftovers, [])


if __name__ == '__main__':
    unittest.main()
