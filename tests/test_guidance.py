"""Tests for proportional landing guidance toward the beacon."""

import unittest

import numpy as np

from booster_sim import guidance
from booster_sim.config import create_default_config, create_test_config
from booster_sim.state import State


class TestGuidance(unittest.TestCase):

    def setUp(self):
        self.cfg = create_default_config()

    def test_distance_to_beacon(self):
        s = State(lateral=[3.0, 4.0])
        self.assertAlmostEqual(guidance.distance_to_beacon(s, self.cfg), 5.0)

    def test_distance_to_offset_beacon(self):
        cfg = create_test_config(beacon_x=10.0, beacon_y=-2.0)
        s = State(lateral=[13.0, 2.0])
        self.assertAlmostEqual(guidance.distance_to_beacon(s, cfg), 5.0)

    def test_correction_step(self):
        s = State(lateral=[10.0, -20.0])
        s2 = guidance.apply_guidance_correction(s, self.cfg)
        np.testing.assert_array_almost_equal(s2.lateral, np.array([9.0, -18.0]))
        # Input state untouched
        np.testing.assert_array_almost_equal(s.lateral, np.array([10.0, -20.0]))

    def test_correction_toward_offset_beacon(self):
        cfg = create_test_config(beacon_x=100.0, beacon_y=50.0)
        s = State(lateral=[110.0, 50.0])
        s2 = guidance.apply_guidance_correction(s, cfg)
        np.testing.assert_array_almost_equal(s2.lateral, np.array([109.0, 50.0]))

    def test_no_correction_inside_deadband(self):
        s = State(lateral=[0.6, 0.8])  # exactly 1.0 m
        s2 = guidance.apply_guidance_correction(s, self.cfg)
        np.testing.assert_array_equal(s2.lateral, s.lateral)

        s = State(lateral=[0.05, 0.03])
        s2 = guidance.apply_guidance_correction(s, self.cfg)
        np.testing.assert_array_equal(s2.lateral, s.lateral)

    def test_correction_just_outside_deadband(self):
        s = State(lateral=[1.01, 0.0])
        correction = guidance.compute_guidance_correction(s, self.cfg)
        self.assertAlmostEqual(correction[0], -0.101)
        self.assertEqual(correction[1], 0.0)

    def test_repeated_correction_converges_to_deadband(self):
        s = State(lateral=[-1000.0, -1000.0])
        distances = []
        for _ in range(200):
            s = guidance.apply_guidance_correction(s, self.cfg)
            distances.append(guidance.distance_to_beacon(s, self.cfg))

        self.assertTrue(all(b <= a for a, b in zip(distances, distances[1:])))
        self.assertLessEqual(distances[-1], 1.0)
        self.assertGreater(distances[-1], 0.9)
        # Once inside the deadband the position freezes
        self.assertEqual(distances[-1], distances[-2])


if __name__ == '__main__':
    unittest.main()
