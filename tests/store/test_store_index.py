import unittest
from datetime import datetime, timezone

from memdrive.models import ROOT, File, Folder
from memdrive.store import EntityIndex


class TestEntityIndex(unittest.TestCase):
    def setUp(self) -> None:
        dt = datetime(2025, 1, 1, tzinfo=timezone.utc)
        self.index = EntityIndex()
        self.index.add_folder(Folder("A", "A", ROOT, dt))
        self.index.add_folder(Folder("B", "B", "A", dt))
        self.index.add_file(File("F", "f.txt", 1, "text/plain", "B", dt, "h-F"))
        self.index.add_file(File("G", "g.txt", 1, "text/plain", ROOT, dt, "h-G"))

    def test_children_keep_insertion_order(self) -> None:
        self.assertEqual(self.index.list_children_ids(ROOT), ["A", "G"])
        self.assertEqual(self.index.list_children_ids("B"), ["F"])
        self.assertEqual(self.index.list_children_ids("nope"), [])

    def test_get_and_kind(self) -> None:
        self.assertTrue(self.index.is_folder("A"))
        self.assertFalse(self.index.is_folder("F"))
        self.assertEqual(self.index.get("F").name, "f.txt")
        self.assertIsNone(self.index.get("nope"))

    def test_closure_includes_descendants(self) -> None:
        self.assertEqual(self.index.closure(["A"]), {"A", "B", "F"})
        self.assertEqual(self.index.closure(["G", "nope"]), {"G"})
        self.assertEqual(self.index.closure([]), set())

    def test_remove_detaches_from_parent(self) -> None:
        removed = self.index.remove("G")
        self.assertEqual(removed.entity_id, "G")
        self.assertEqual(self.index.list_children_ids(ROOT), ["A"])
        self.assertIsNone(self.index.remove("G"))

    def test_remove_folder_drops_its_children_entry(self) -> None:
        self.index.remove("B")
        self.assertNotIn("B", self.index.children_by_parent_id)
        # Children are not removed by a single remove.
        self.assertTrue(self.index.has("F"))


if __name__ == "__main__":
    unittest.main()
