import unittest
import warnings

import numpy as np

from nbodysim import (
    Body,
    G_NEWTON,
    bodies_to_arrays,
    geometry_buffers,
    gravitational_force,
    inner_solar_system,
)


class TestGeometryBuffers(unittest.TestCase):

    def test_shapes_and_values(self):
        q = np.array([[0.0, 0.0], [3.0, 4.0]])
        diff, r2, inv_r3 = geometry_buffers(q)
        self.assertEqual(diff.shape, (2, 2, 2))
        np.testing.assert_array_equal(diff[1, 0], [3.0, 4.0])
        self.assertEqual(r2[0, 1], 25.0)
        self.assertAlmostEqual(inv_r3[0, 1], 1.0 / 125.0)
        self.assertEqual(inv_r3[0, 0], 0.0)

    def test_coincident_is_not_masked(self):
        q = np.array([[1.0, 1.0], [1.0, 1.0]])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            _, _, inv_r3 = geometry_buffers(q)
        self.assertTrue(np.isinf(inv_r3[0, 1]))
        self.assertEqual(inv_r3[1, 1], 0.0)


class TestGravitationalForce(unittest.TestCase):

    def test_matches_body_sums(self):
        bodies = inner_solar_system()
        m, q, _ = bodies_to_arrays(bodies)
        F = gravitational_force(q, m, G_NEWTON)
        for i, b in enumerate(bodies):
            self.assertTrue(np.isclose(F[i, 0], b.net_force_x(bodies), rtol=1e-12, atol=0.0))
            self.assertTrue(np.isclose(F[i, 1], b.net_force_y(bodies), rtol=1e-12, atol=1e8))

    def test_sums_to_zero(self):
        m, q, _ = bodies_to_arrays(inner_solar_system())
        F = gravitational_force(q, m)
        total = F.sum(axis=0)
        self.assertLess(abs(total[0]), 1e-10 * np.abs(F[:, 0]).max())

    def test_trivial_inputs(self):
        np.testing.assert_array_equal(gravitational_force([[1.0, 2.0]], [3.0]), [[0.0, 0.0]])
        q = [[0.0, 0.0], [1.0, 0.0]]
        np.testing.assert_array_equal(gravitational_force(q, [1.0, 1.0], G=0.0), np.zeros((2, 2)))

    def test_unit_pair(self):
        F = gravitational_force([[0.0, 0.0], [2.0, 0.0]], [2.0, 3.0], G=1.0)
        np.testing.assert_allclose(F, [[1.5, 0.0], [-1.5, 0.0]])

    def test_coincident_gives_nan(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            F = gravitational_force([[0.0, 0.0], [0.0, 0.0]], [1.0, 1.0], G=1.0)
        self.assertTrue(np.all(np.isnan(F)))

    def test_accepts_body_arrays(self):
        a = Body(0.0, 0.0, 0.0, 0.0, 1.0, "a")
        b = Body(0.0, 1.0, 0.0, 0.0, 1.0, "b")
        m, q, _ = bodies_to_arrays([a, b])
        F = gravitational_force(q, m, G=1.0)
        self.assertAlmostEqual(F[0, 1], a.force_component_y(b, G=1.0))


if __name__ == "__main__":
    unittest.main()
