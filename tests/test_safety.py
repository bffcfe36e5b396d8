"""
Tests for the safety module.
"""

import unittest

from reactor_sim.safety import SafetyMonitor
from reactor_sim.state import OperationalMode, ReactorState, WarningKind


class TestScram(unittest.TestCase):
    """Test automatic SCRAM."""

    def setUp(self):
        self.monitor = SafetyMonitor()

    def test_normal_operation(self):
        """Test a healthy core stays running."""
        state = ReactorState()
        new, mode, warnings = self.monitor.evaluate(state, OperationalMode.RUNNING)

        self.assertEqual(mode, OperationalMode.RUNNING)
        self.assertEqual(warnings, set())
        self.assertEqual(new, state)

    def test_scram_on_temperature(self):
        """Test SCRAM when temperature exceeds 1000."""
        state = ReactorState(
            neutron_population=100.0,
            control_rod_insertion=0.2,
            core_temperature=1000.5,
        )
        new, mode, warnings = self.monitor.evaluate(state, OperationalMode.RUNNING)

        self.assertEqual(mode, OperationalMode.SHUTDOWN)
        self.assertEqual(warnings, {WarningKind.AUTO_SCRAM})
        self.assertEqual(new.control_rod_insertion, 1.0)
        self.assertAlmostEqual(new.neutron_population, 5.0)
        self.assertAlmostEqual(new.core_temperature, 800.5)

    def test_scram_on_neutrons(self):
        """Test SCRAM when the neutron population exceeds 2000."""
        state = ReactorState(neutron_population=2500.0)
        new, mode, warnings = self.monitor.evaluate(state, OperationalMode.RUNNING)

        self.assertEqual(mode, OperationalMode.SHUTDOWN)
        self.assertIn(WarningKind.AUTO_SCRAM, warnings)
        self.assertAlmostEqual(new.neutron_population, 125.0)
        self.assertAlmostEqual(new.core_temperature, 100.0)

    def test_thresholds_are_strict(self):
        """Test values exactly at the limits do not trip."""
        state = ReactorState(neutron_population=2000.0, core_temperature=1000.0)
        _, mode, warnings = self.monitor.evaluate(state, OperationalMode.RUNNING)

        self.assertEqual(mode, OperationalMode.RUNNING)
        self.assertEqual(warnings, set())

    def test_input_not_mutated(self):
        """Test evaluate leaves its input untouched."""
        state = ReactorState(core_temperature=1500.0)
        self.monitor.evaluate(state, OperationalMode.RUNNING)
        self.assertEqual(state.core_temperature, 1500.0)
        self.assertEqual(state.control_rod_insertion, 0.5)


class TestMeltdown(unittest.TestCase):
    """Test meltdown detection."""

    def setUp(self):
        self.monitor = SafetyMonitor()

    def test_meltdown_after_scram(self):
        """Test meltdown when the core is still above 2000 after SCRAM cooling."""
        state = ReactorState(core_temperature=2300.0)
        new, mode, warnings = self.monitor.evaluate(state, OperationalMode.RUNNING)

        self.assertEqual(mode, OperationalMode.MELTED)
        self.assertEqual(warnings, {WarningKind.AUTO_SCRAM, WarningKind.MELTDOWN})
        self.assertAlmostEqual(new.core_temperature, 2100.0)
        self.assertEqual(new.control_rod_insertion, 1.0)

    def test_scram_prevents_meltdown(self):
        """Test SCRAM cooling below 2000 prevents meltdown that tick."""
        state = ReactorState(core_temperature=2150.0)
        new, mode, warnings = self.monitor.evaluate(state, OperationalMode.RUNNING)

        self.assertEqual(mode, OperationalMode.SHUTDOWN)
        self.assertNotIn(WarningKind.MELTDOWN, warnings)
        self.assertAlmostEqual(new.core_temperature, 1950.0)

    def test_melted_is_terminal(self):
        """Test nothing changes once melted."""
        state = ReactorState(core_temperature=2500.0)
        new, mode, warnings = self.monitor.evaluate(state, OperationalMode.MELTED)

        self.assertEqual(mode, OperationalMode.MELTED)
        self.assertIs(new, state)
        self.assertEqual(warnings, set())
        self.assertTrue(mode.is_terminal)

    def test_shutdown_left_alone(self):
        """Test a shut down reactor is not re-evaluated."""
        state = ReactorState(core_temperature=1500.0)
        new, mode, warnings = self.monitor.evaluate(state, OperationalMode.SHUTDOWN)

        self.assertEqual(mode, OperationalMode.SHUTDOWN)
        self.assertIs(new, state)
        self.assertEqual(warnings, set())
        self.assertFalse(mode.is_terminal)


if __name__ == "__main__":
    unittest.main()
