import contextlib
import io
import os
import tempfile
import unittest

import pygame

from nbodysim import ImageDrawer, NBodySimulation, RecordingDrawer, Body, world_to_screen
from nbodysim.pygame_drawer import PygameDrawer


class TestWorldToScreen(unittest.TestCase):

    def test_corners_and_center(self):
        self.assertEqual(world_to_screen(0.0, 0.0, 10.0, 200, 100), (100.0, 50.0))
        self.assertEqual(world_to_screen(-10.0, 10.0, 10.0, 200, 100), (0.0, 0.0))
        self.assertEqual(world_to_screen(10.0, -10.0, 10.0, 200, 100), (200.0, 100.0))


class TestRecordingDrawer(unittest.TestCase):

    def test_is_an_image_drawer(self):
        self.assertIsInstance(RecordingDrawer(), ImageDrawer)

    def test_frames(self):
        drawer = RecordingDrawer()
        sim = NBodySimulation([
            Body(1.0, 2.0, 0.0, 0.0, 1.0, "a.gif"),
            Body(3.0, 4.0, 0.0, 0.0, 1.0, "b.gif"),
        ], drawer=drawer)
        sim.render()
        sim.render()
        self.assertEqual(len(drawer.frames), 2)
        self.assertEqual(drawer.frames[0], [("a.gif", 1.0, 2.0), ("b.gif", 3.0, 4.0)])
        self.assertEqual(len(drawer.calls), 4)


class TestPygameDrawer(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        red = pygame.Surface((5, 5))
        red.fill((255, 0, 0))
        pygame.image.save(red, os.path.join(self.tmp.name, "red.bmp"))
        self.surface = pygame.Surface((100, 100))

    def tearDown(self):
        self.tmp.cleanup()

    def _drawer(self):
        return PygameDrawer(50.0, image_dir=self.tmp.name, background=None, surface=self.surface)

    def test_is_an_image_drawer(self):
        self.assertIsInstance(self._drawer(), ImageDrawer)

    def test_blits_image_centered(self):
        drawer = self._drawer()
        drawer.begin_frame()
        drawer.draw_image_at("red.bmp", 0.0, 0.0)
        drawer.end_frame()
        self.assertEqual(tuple(self.surface.get_at((50, 50)))[:3], (255, 0, 0))
        self.assertEqual(tuple(self.surface.get_at((5, 5)))[:3], (0, 0, 0))

    def test_y_axis_points_up(self):
        drawer = self._drawer()
        drawer.begin_frame()
        drawer.draw_image_at("red.bmp", 0.0, 30.0)
        self.assertEqual(tuple(self.surface.get_at((50, 20)))[:3], (255, 0, 0))
        self.assertEqual(tuple(self.surface.get_at((50, 80)))[:3], (0, 0, 0))

    def test_missing_image_draws_placeholder_once(self):
        drawer = self._drawer()
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            drawer.begin_frame()
            drawer.draw_image_at("nope.gif", 0.0, 0.0)
            drawer.draw_image_at("nope.gif", 0.0, 0.0)
        self.assertEqual(buf.getvalue().count("[warning] image not found"), 1)
        self.assertNotEqual(tuple(self.surface.get_at((50, 50)))[:3], (0, 0, 0))

    def test_nonfinite_position_is_skipped(self):
        drawer = self._drawer()
        drawer.begin_frame()
        drawer.draw_image_at("red.bmp", float("nan"), 0.0)
        drawer.draw_image_at("red.bmp", float("inf"), 0.0)
        self.assertEqual(tuple(self.surface.get_at((50, 50)))[:3], (0, 0, 0))

    def test_begin_frame_clears(self):
        drawer = self._drawer()
        drawer.draw_image_at("red.bmp", 0.0, 0.0)
        drawer.begin_frame()
        self.assertEqual(tuple(self.surface.get_at((50, 50)))[:3], (0, 0, 0))


if __name__ == "__main__":
    unittest.main()
