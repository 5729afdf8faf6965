import dataclasses
import unittest
from datetime import datetime, timezone

from memdrive.models import ROOT, Breadcrumb, File, Folder
from memdrive.util.mime import PreviewKind


class TestEntities(unittest.TestCase):
    def setUp(self) -> None:
        self.dt = datetime(2025, 1, 15, tzinfo=timezone.utc)

    def test_folder_is_immutable(self) -> None:
        folder = Folder(folder_id="F1", name="Docs", parent_id=ROOT, created_at=self.dt)
        self.assertEqual(folder.entity_id, "F1")
        self.assertEqual(folder.parent_id, "root")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            folder.name = "Renamed"  # type: ignore[misc]
        self.assertEqual(folder.name, "Docs")

    def test_file_is_immutable(self) -> None:
        file = File(
            file_id="X1",
            name="x.png",
            size=100,
            mime_type="image/png",
            parent_id="F1",
            created_at=self.dt,
            handle="blob:1",
        )
        self.assertEqual(file.entity_id, "X1")
        self.assertIs(file.preview_kind, PreviewKind.GENERIC)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            file.name = "y.png"  # type: ignore[misc]

    def test_breadcrumb_equality(self) -> None:
        self.assertEqual(Breadcrumb(ROOT, "My Drive"), Breadcrumb(ROOT, "My Drive"))
        self.assertNotEqual(Breadcrumb(ROOT, "My Drive"), Breadcrumb("F1", "My Drive"))


if __name__ == "__main__":
    unittest.main()
