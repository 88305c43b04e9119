"""Tests for browser navigation state and the viewport invariant."""

from __future__ import annotations

import random
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tmages.errors import ListingError
from tmages.state import BrowserState, BrowserView, clamp_scroll, default_start_dir


def _state_with_entries(entries: list[str], current_dir: Path = Path("/tmp/demo")) -> BrowserState:
    return BrowserState(current_dir=current_dir, entries=list(entries), lister=lambda _path: list(entries))


class MoveSelectionTests(unittest.TestCase):
    def test_up_at_top_is_noop(self) -> None:
        state = _state_with_entries(["..", "a", "b"])
        for _ in range(3):
            self.assertFalse(state.move_selection(-1))
        self.assertEqual((state.selected, state.scroll), (0, 0))

    def test_down_at_bottom_is_noop(self) -> None:
        state = _state_with_entries(["..", "a", "b"])
        state.move_selection(1)
        state.move_selection(1)
        self.assertEqual(state.selected, 2)
        self.assertFalse(state.move_selection(1))
        self.assertEqual(state.selected, 2)

    def test_moving_past_bottom_makes_selection_last_visible_row(self) -> None:
        state = _state_with_entries([f"f{i}" for i in range(10)])
        state.resize(3)
        for _ in range(4):
            state.move_selection(1)
        self.assertEqual(state.selected, 4)
        self.assertEqual(state.scroll, 2)

    def test_moving_above_window_snaps_scroll_to_selection(self) -> None:
        state = _state_with_entries([f"f{i}" for i in range(10)])
        state.resize(3)
        for _ in range(9):
            state.move_selection(1)
        self.assertEqual(state.scroll, 7)
        for _ in range(3):
            state.move_selection(-1)
        self.assertEqual(state.selected, 6)
        self.assertEqual(state.scroll, 6)

    def test_viewport_invariant_holds_for_random_moves(self) -> None:
        rng = random.Random(7)
        for height in (1, 2, 5, 13):
            state = _state_with_entries([f"f{i:02d}" for i in range(40)])
            state.resize(height)
            for _ in range(400):
                state.move_selection(rng.choice((-1, 1)))
                self.assertTrue(0 <= state.selected < len(state.entries))
                self.assertLessEqual(state.scroll, state.selected)
                self.assertLess(state.selected, state.scroll + height)

    def test_no_mutation_after_exit(self) -> None:
        state = _state_with_entries(["..", "a", "b"])
        state.request_exit()
        state.request_exit()
        self.assertTrue(state.exit)
        self.assertFalse(state.move_selection(1))
        self.assertEqual(state.selected, 0)


class ResizeAndViewTests(unittest.TestCase):
    def test_shrinking_viewport_keeps_selection_visible(self) -> None:
        state = _state_with_entries([f"f{i}" for i in range(20)])
        state.resize(10)
        for _ in range(9):
            state.move_selection(1)
        self.assertEqual(state.scroll, 0)

        state.resize(4)

        self.assertEqual(state.scroll, 6)

    def test_growing_viewport_keeps_window_start(self) -> None:
        state = _state_with_entries([f"f{i}" for i in range(10)])
        state.resize(2)
        for _ in range(9):
            state.move_selection(1)
        self.assertEqual(state.scroll, 8)

        state.resize(5)

        self.assertEqual(state.scroll, 8)
        view = state.current_view(5)
        self.assertEqual(view.start, 8)
        self.assertEqual(view.entries, ("f8", "f9"))
        self.assertEqual(view.selected_row, 1)

    def test_current_view_is_pure_and_maps_indices(self) -> None:
        state = _state_with_entries([f"f{i}" for i in range(10)])
        state.resize(8)
        for _ in range(6):
            state.move_selection(1)

        view = state.current_view(3)

        self.assertIsInstance(view, BrowserView)
        self.assertEqual(view.entries, ("f4", "f5", "f6"))
        self.assertEqual(view.start, 4)
        self.assertEqual(view.selected_row, 2)
        self.assertEqual(view.relative_index(5), 1)
        self.assertIsNone(view.relative_index(3))
        self.assertEqual(view.absolute_index(0), 4)
        self.assertEqual(view.current_dir, Path("/tmp/demo"))
        self.assertEqual(state.scroll, 0)

    def test_current_view_shorter_listing_than_viewport(self) -> None:
        state = _state_with_entries(["..", "a"])
        view = state.current_view(10)
        self.assertEqual(view.entries, ("..", "a"))
        self.assertEqual(view.selected_row, 0)

    def test_clamp_scroll_policy(self) -> None:
        self.assertEqual(clamp_scroll(selected=2, scroll=5, viewport_height=3), 2)
        self.assertEqual(clamp_scroll(selected=7, scroll=0, viewport_height=3), 5)
        self.assertEqual(clamp_scroll(selected=4, scroll=3, viewport_height=3), 3)
        self.assertEqual(clamp_scroll(selected=0, scroll=0, viewport_height=0), 0)


class ActivateTests(unittest.TestCase):
    def test_open_starts_at_first_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "pics").mkdir()

            state = BrowserState.open(root)

        self.assertEqual(state.current_dir, root)
        self.assertEqual(state.entries, ["..", "pics/"])
        self.assertEqual((state.selected, state.scroll, state.exit), (0, 0, False))

    def test_open_propagates_listing_failure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ListingError):
                BrowserState.open(Path(tmp) / "missing")

    def test_open_defaults_to_home_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            home = Path(tmp).resolve()
            with mock.patch("tmages.state.Path.home", return_value=home):
                state = BrowserState.open()
        self.assertEqual(state.current_dir, home)

    def test_default_start_dir_falls_back_to_cwd_marker(self) -> None:
        with mock.patch("tmages.state.Path.home", side_effect=RuntimeError("no home")):
            self.assertEqual(default_start_dir(), Path("."))

    def test_descend_into_directory_and_back_up(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "pics").mkdir()
            (root / "pics" / "cat.png").write_bytes(b"")

            state = BrowserState.open(root)
            state.resize(5)
            state.move_selection(1)
            self.assertEqual(state.selected_entry(), "pics/")

            self.assertTrue(state.activate())
            self.assertEqual(state.current_dir, root / "pics")
            self.assertEqual(state.entries, ["..", "cat.png"])
            self.assertEqual((state.selected, state.scroll), (0, 0))

            self.assertTrue(state.activate())
            self.assertEqual(state.current_dir, root)

    def test_activate_parent_marker_at_root_is_noop(self) -> None:
        state = _state_with_entries(["..", "bin/"], current_dir=Path("/"))
        before = (state.current_dir, list(state.entries), state.selected, state.scroll)

        self.assertFalse(state.activate())

        self.assertEqual((state.current_dir, state.entries, state.selected, state.scroll), before)

    def test_activate_file_entry_does_not_relist(self) -> None:
        lister = mock.Mock(return_value=["..", "other"])
        state = BrowserState(current_dir=Path("/tmp/demo"), entries=["..", "a.png", "b.txt"], lister=lister)
        state.resize(2)
        state.move_selection(1)
        state.move_selection(1)

        self.assertFalse(state.activate())

        lister.assert_not_called()
        self.assertEqual(state.selected, 2)
        self.assertEqual(state.scroll, 1)

    def test_activate_directory_deleted_after_listing_is_noop(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a").mkdir()
            (root / "gone").mkdir()

            state = BrowserState.open(root)
            state.resize(1)
            state.move_selection(1)
            state.move_selection(1)
            self.assertEqual(state.selected_entry(), "gone/")
            shutil.rmtree(root / "gone")
            before = (state.current_dir, list(state.entries), state.selected, state.scroll)

            self.assertFalse(state.activate())

            self.assertEqual((state.current_dir, state.entries, state.selected, state.scroll), before)

    def test_listing_failure_during_navigation_keeps_prior_state(self) -> None:
        def lister(path: Path) -> list[str]:
            raise ListingError(f"denied: {path}")

        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "locked").mkdir()
            state = BrowserState(current_dir=root, entries=["..", "locked/"], lister=lister)
            state.move_selection(1)

            self.assertFalse(state.activate())

            self.assertEqual(state.current_dir, root)
            self.assertEqual(state.entries, ["..", "locked/"])
            self.assertEqual(state.selected, 1)

    def test_ascend_goes_to_parent_regardless_of_selection(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "child").mkdir()
            (root / "child" / "x.txt").write_text("", encoding="utf-8")
            state = BrowserState.open(root / "child")
            state.move_selection(1)

            self.assertTrue(state.ascend())

            self.assertEqual(state.current_dir, root)
            self.assertEqual(state.selected, 0)


class SelectedPathTests(unittest.TestCase):
    def test_selected_image_path_requires_existing_image_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "Photo.JPG").write_bytes(b"\xff\xd8")
            (root / "notes.txt").write_text("", encoding="utf-8")
            (root / "fake.png").mkdir()

            state = BrowserState.open(root)
            self.assertEqual(state.entries, ["..", "Photo.JPG", "fake.png/", "notes.txt"])

            self.assertIsNone(state.selected_image_path())
            state.move_selection(1)
            self.assertEqual(state.selected_image_path(), root / "Photo.JPG")
            state.move_selection(1)
            self.assertIsNone(state.selected_image_path())
            state.move_selection(1)
            self.assertIsNone(state.selected_image_path())

    def test_selected_image_path_honors_custom_extensions(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "scan.tiff").write_bytes(b"")
            state = BrowserState.open(root)
            state.move_selection(1)

            self.assertIsNone(state.selected_image_path())
            self.assertEqual(state.selected_image_path(("tiff",)), root / "scan.tiff")


if __name__ == "__main__":
    unittest.main()
