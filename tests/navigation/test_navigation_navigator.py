import unittest
from datetime import datetime, timezone

from memdrive.errors import ValidationError
from memdrive.models import ROOT, Breadcrumb, Folder
from memdrive.navigation import Navigator


def _folder(folder_id: str, parent_id: str) -> Folder:
    return Folder(
        folder_id=folder_id,
        name=folder_id.upper(),
        parent_id=parent_id,
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


class TestNavigator(unittest.TestCase):
    def setUp(self) -> None:
        self.nav = Navigator()
        self.a = _folder("a", ROOT)
        self.b = _folder("b", "a")
        self.c = _folder("c", "b")

    def _assert_invariant(self) -> None:
        trail = self.nav.trail
        self.assertEqual(trail[0], Breadcrumb(ROOT, "My Drive"))
        self.assertEqual(trail[-1].folder_id, self.nav.location_id)

    def test_starts_at_root(self) -> None:
        self.assertEqual(self.nav.location_id, ROOT)
        self.assertTrue(self.nav.at_root)
        self.assertEqual(self.nav.trail, (Breadcrumb(ROOT, "My Drive"),))

    def test_custom_root_name(self) -> None:
        nav = Navigator(root_name="Home")
        self.assertEqual(nav.trail[0].name, "Home")

    def test_enter_appends_crumbs(self) -> None:
        self.nav.enter(self.a)
        self.nav.enter(self.b)
        self.assertEqual([c.folder_id for c in self.nav.trail], [ROOT, "a", "b"])
        self.assertEqual(self.nav.trail[-1].name, "B")
        self._assert_invariant()

    def test_enter_non_child_rejected_without_change(self) -> None:
        with self.assertRaises(ValidationError):
            self.nav.enter(self.b)
        self.assertEqual(self.nav.location_id, ROOT)
        self.assertEqual(len(self.nav.trail), 1)

    def test_jump_to_truncates(self) -> None:
        for folder in (self.a, self.b, self.c):
            self.nav.enter(folder)
        self.nav.jump_to(1)
        self.assertEqual(self.nav.location_id, "a")
        self.assertEqual(len(self.nav.trail), 2)
        self._assert_invariant()
        self.nav.jump_to(0)
        self.assertEqual(self.nav.location_id, ROOT)
        self._assert_invariant()

    def test_jump_to_current_is_noop(self) -> None:
        self.nav.enter(self.a)
        self.nav.jump_to(1)
        self.assertEqual(self.nav.location_id, "a")

    def test_jump_to_out_of_range(self) -> None:
        self.nav.enter(self.a)
        for index in (2, 10, -1):
            with self.assertRaises(ValidationError):
                self.nav.jump_to(index)
        self.assertEqual(self.nav.location_id, "a")

    def test_relabel(self) -> None:
        self.nav.enter(self.a)
        self.nav.relabel("a", "Renamed")
        self.nav.relabel(ROOT, "ignored")
        self.assertEqual(self.nav.trail[1].name, "Renamed")
        self.assertEqual(self.nav.trail[0].name, "My Drive")

    def test_reset_to_path(self) -> None:
        self.nav.reset([self.a, self.b])
        self.assertEqual(self.nav.location_id, "b")
        self._assert_invariant()
        self.nav.reset()
        self.assertEqual(self.nav.location_id, ROOT)

    def test_reset_rejects_gaps(self) -> None:
        with self.assertRaises(ValidationError):
            self.nav.reset([self.a, self.c])
        self.assertEqual(self.nav.location_id, ROOT)


if __name__ == "__main__":
    unittest.main()
