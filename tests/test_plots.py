"""
Unit tests for plot generation functionality.

Tests that plots are created correctly and files are generated from a
short simulated descent.
"""

import os
import tempfile
import unittest

import numpy as np

from booster_sim.config import create_test_config
from booster_sim.main import SimulationLog, run_simulation
from booster_sim.mission_manager import FlightPhase
from booster_sim.plotting import (
    generate_all_plots,
    extract_log_data,
    find_phase_changes,
    TrajectoryData,
)
from booster_sim.state import State


class TestPlotGeneration(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.config = create_test_config()
        start = State(altitude=300.0, vertical_velocity=5.0, mass=cls.config.empty_mass,
                      fuel_mass=0.0, active_engines=11, second_stage_attached=False,
                      lateral=[40.0, -30.0])
        _, cls.log, _ = run_simulation(cls.config, initial_state=start,
                                       initial_phase=FlightPhase.BOOSTBACK)

    def test_extract_log_data(self):
        data = extract_log_data(self.log)
        self.assertIsInstance(data, TrajectoryData)
        self.assertEqual(len(data.time), len(self.log.time))
        # Altitude is converted to km
        self.assertAlmostEqual(data.altitude[0], self.log.altitude[0] / 1000.0)

    def test_find_phase_changes(self):
        data = extract_log_data(self.log)
        changes = find_phase_changes(data)
        self.assertEqual(len(changes), 1)
        self.assertEqual(data.phase_name[changes[0]], 'LANDING')

    def test_extract_empty_log_raises(self):
        with self.assertRaises(ValueError):
            extract_log_data(SimulationLog())

    def test_generate_all_plots(self):
        with tempfile.TemporaryDirectory() as tmp:
            out_dir = os.path.join(tmp, 'plots')
            paths = generate_all_plots(self.log, out_dir, config=self.config)
            self.assertEqual(len(paths), 3)
            for path in paths:
                self.assertTrue(os.path.isfile(path))
                self.assertGreater(os.path.getsize(path), 0)
            names = sorted(os.path.basename(p) for p in paths)
            self.assertEqual(names, ['01_altitude_velocity.png',
                                     '02_propellant.png',
                                     '03_ground_track.png'])

    def test_ground_track_converges(self):
        data = extract_log_data(self.log)
        self.assertLess(data.distance_to_beacon[-1], data.distance_to_beacon[0])
        self.assertTrue(np.all(np.diff(data.distance_to_beacon) <= 0.0))


if __name__ == '__main__':
    unittest.main()
