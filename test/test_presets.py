import unittest

import numpy as np

from nbodysim import (
    PRESETS,
    bodies_to_arrays,
    equal_mass_polygon,
    inner_solar_system,
    remove_center_of_mass_velocity,
    sun_earth,
    arrays_to_bodies,
)


class TestPresets(unittest.TestCase):

    def test_inner_solar_system(self):
        bodies = inner_solar_system()
        self.assertEqual([b.image_id for b in bodies],
                         ["earth.gif", "mars.gif", "mercury.gif", "sun.gif", "venus.gif"])
        sun = bodies[3]
        self.assertEqual((sun.x, sun.y, sun.mass), (0.0, 0.0, 1.989e30))
        self.assertEqual(bodies[0].vy, 2.98e4)

    def test_presets_are_fresh(self):
        a = inner_solar_system()
        b = inner_solar_system()
        self.assertIsNot(a[0], b[0])

    def test_sun_earth(self):
        earth, sun = sun_earth()
        self.assertEqual(earth.distance_to(sun), 1.496e11)

    def test_polygon_has_no_net_momentum(self):
        bodies = equal_mass_polygon(5, radius=2.0, mass=3.0, G=1.0)
        m, q, v = bodies_to_arrays(bodies)
        self.assertEqual(len(bodies), 5)
        np.testing.assert_allclose(np.hypot(q[:, 0], q[:, 1]), 2.0)
        np.testing.assert_allclose(np.sum(m[:, None] * v, axis=0), [0.0, 0.0], atol=1e-12)

    def test_registry(self):
        for name, make in PRESETS.items():
            self.assertGreater(len(make()), 1, name)


class TestArrayConversion(unittest.TestCase):

    def test_remove_center_of_mass_velocity(self):
        m = np.array([1.0, 3.0])
        v = np.array([[4.0, 0.0], [0.0, 4.0]])
        out = remove_center_of_mass_velocity(m, v)
        np.testing.assert_allclose(out, [[3.0, -3.0], [-1.0, 1.0]])

    def test_single_body_unchanged(self):
        v = np.array([[1.0, 2.0]])
        out = remove_center_of_mass_velocity(np.array([5.0]), v)
        np.testing.assert_array_equal(out, v)
        self.assertIsNot(out, v)

    def test_bodies_keep_order(self):
        bodies = inner_solar_system()
        m, q, v = bodies_to_arrays(bodies)
        back = arrays_to_bodies(m, q, v, [b.image_id for b in bodies])
        self.assertEqual([repr(b) for b in back], [repr(b) for b in bodies])

    def test_empty(self):
        m, q, v = bodies_to_arrays([])
        self.assertEqual(q.shape, (0, 2))
        self.assertEqual(m.shape, (0,))


if __name__ == "__main__":
    unittest.main()
