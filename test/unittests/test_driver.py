"""
Tests of the experiment lifecycle.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import unittest

from vabench import errors
from vabench.driver import SimulationDriver, run_benchmark, INITIAL, BUILT, DONE, FAILED
from vabench.mock import MockKernel
from vabench.parameters import DEFAULTS
from mocks import small_parameters, traced_kernel, stub_kernel


class LifecycleTest(unittest.TestCase):

    def setUp(self):
        self.kernel = traced_kernel()
        self.driver = SimulationDriver(small_parameters(), self.kernel)

    def test_phases(self):
        self.assertEqual(self.driver.phase, INITIAL)
        self.driver.build()
        self.assertEqual(self.driver.phase, BUILT)
        self.driver.run()
        self.assertEqual(self.driver.phase, DONE)

    def test_run_before_build(self):
        self.assertRaises(errors.PhaseError, self.driver.run)
        self.assertEqual(self.kernel.simulate.call_count, 0)

    def test_report_before_run(self):
        self.assertRaises(errors.PhaseError, self.driver.report)
        self.driver.build()
        self.assertRaises(errors.PhaseError, self.driver.report)

    def test_build_twice(self):
        self.driver.build()
        self.assertRaises(errors.PhaseError, self.driver.build)

    def test_run_twice(self):
        self.driver.build()
        self.driver.run()
        self.assertRaises(errors.PhaseError, self.driver.run)
        self.assertEqual(self.kernel.simulate.call_count, 1)

    def test_single_simulate_call(self):
        self.driver.build()
        self.driver.run()
        self.kernel.simulate.assert_called_once_with(100.0)

    def test_kernel_configured_before_anything_else(self):
        self.driver.build()
        calls = [c[0] for c in self.kernel.calls.mock_calls]
        self.assertEqual(calls[:2], ["configure", "set_defaults"])
        config = self.kernel.configure.call_args[0][0]
        self.assertEqual(config.resolution, 0.1)
        self.assertEqual(config.rng_seed, 12345)

    def test_explicit_config(self):
        from vabench.kernel import ExecutionConfig
        config = ExecutionConfig(resolution=0.05, threads=2)
        driver = SimulationDriver(small_parameters(), self.kernel, config=config)
        driver.build()
        self.kernel.configure.assert_called_once_with(config)

    def test_timer_marks(self):
        self.driver.build()
        self.driver.run()
        self.assertEqual([label for label, _ in self.driver.timer.marks], ["build", "run"])
        self.assertGreaterEqual(self.driver.metrics.build_time, 0.0)
        self.assertGreaterEqual(self.driver.metrics.run_time, 0.0)

    def test_parameters_as_dict(self):
        parameters = dict(DEFAULTS, n_exc=40, n_inh=10, n_stim=20, n_rec=5, simtime=10.0)
        driver = SimulationDriver(parameters, MockKernel())
        driver.build()
        self.assertEqual(driver.network.n_neurons, 50)


class MissingConfigurationTest(unittest.TestCase):

    def test_no_parameter_set(self):
        kernel = traced_kernel()
        driver = SimulationDriver(None, kernel)
        with self.assertLogs("vabench", level="ERROR") as cm:
            self.assertRaises(errors.ConfigurationError, driver.build)
        self.assertEqual(len(cm.records), 1)
        self.assertIn("ParameterSet", cm.output[0])
        self.assertEqual(kernel.calls.mock_calls, [])
        self.assertEqual(driver.phase, FAILED)

    def test_invalid_configuration_logged_once(self):
        kernel = traced_kernel()
        driver = SimulationDriver(small_parameters(n_stim=41), kernel)
        with self.assertLogs("vabench", level="ERROR") as cm:
            self.assertRaises(errors.ConfigurationError, driver.build)
        self.assertEqual(len(cm.records), 1)
        self.assertEqual(driver.phase, FAILED)

    def test_device_subsets_checked_before_anything_is_created(self):
        for overrides in ({"n_stim": 41}, {"n_rec": 11}, {"n_rec": -1}):
            kernel = traced_kernel()
            driver = SimulationDriver(small_parameters(**overrides), kernel)
            with self.assertLogs("vabench", level="ERROR"):
                self.assertRaises(errors.ConfigurationError, driver.build)
            self.assertEqual(kernel.create.call_count, 0)
            self.assertEqual(kernel.calls.mock_calls, [])

    def test_fractional_seed_rejected(self):
        kernel = traced_kernel()
        driver = SimulationDriver(dict(DEFAULTS, rng_seed=5.5), kernel)
        with self.assertLogs("vabench", level="ERROR") as cm:
            self.assertRaises(errors.ConfigurationError, driver.build)
        self.assertEqual(len(cm.records), 1)
        self.assertEqual(kernel.calls.mock_calls, [])

    def test_integral_float_seed_accepted(self):
        driver = SimulationDriver(small_parameters(rng_seed=5.0), MockKernel())
        driver.build()
        self.assertEqual(driver.phase, BUILT)
        self.assertEqual(driver.config.rng_seed, 5)

    def test_no_report_after_failed_build(self):
        driver = SimulationDriver(None, traced_kernel())
        with self.assertLogs("vabench", level="ERROR"):
            self.assertRaises(errors.ConfigurationError, driver.build)
        self.assertRaises(errors.PhaseError, driver.run)
        self.assertRaises(errors.PhaseError, driver.report)


class KernelFailureTest(unittest.TestCase):

    def test_failure_during_build(self):
        kernel = stub_kernel()
        kernel.connect.side_effect = errors.KernelError("out of memory")
        driver = SimulationDriver(small_parameters(), kernel)
        self.assertRaises(errors.KernelError, driver.build)
        self.assertEqual(driver.phase, FAILED)
        self.assertIsNone(driver.network)
        self.assertRaises(errors.PhaseError, driver.run)
        self.assertEqual(kernel.simulate.call_count, 0)

    def test_failure_during_run(self):
        kernel = stub_kernel()
        kernel.simulate.side_effect = errors.KernelError("MPI failure")
        driver = SimulationDriver(small_parameters(), kernel)
        driver.build()
        self.assertRaises(errors.KernelError, driver.run)
        self.assertEqual(driver.phase, FAILED)
        self.assertRaises(errors.PhaseError, driver.report)
        self.assertFalse(driver.metrics.complete)

    def test_run_benchmark_propagates(self):
        kernel = stub_kernel()
        kernel.simulate.side_effect = errors.KernelError("MPI failure")
        self.assertRaises(errors.KernelError, run_benchmark, small_parameters(), kernel)


class ReportTest(unittest.TestCase):

    def test_rates_from_recorder_state(self):
        kernel = stub_kernel(n_events=1000)
        driver = SimulationDriver(small_parameters(n_rec=5, simtime=100.0), kernel)
        text = driver.execute()
        # 1000 events / (5 neurons * 100 ms)
        self.assertIn("Excitatory rate   : 2000.00 Hz", text)
        self.assertIn("Inhibitory rate   : 2000.00 Hz", text)

    def test_rates_across_processes(self):
        kernel = stub_kernel(n_events=1000, num_processes=4)
        driver = SimulationDriver(small_parameters(n_rec=5, simtime=100.0), kernel)
        text = driver.execute()
        self.assertIn("Excitatory rate   : 8000.00 Hz", text)

    def test_report_on_mock_kernel(self):
        driver = SimulationDriver(small_parameters(), MockKernel())
        lines = driver.execute().splitlines()
        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[0], "Number of neurons : 50")
        # 250 recurrent connections, 20 from the stimulus, 2 x 5 to the recorders
        self.assertEqual(lines[1], "Number of synapses: 280")

    def test_report_is_idempotent(self):
        driver = SimulationDriver(small_parameters(), MockKernel())
        first = driver.execute()
        self.assertEqual(driver.report(), first)

    def test_metrics_order(self):
        driver = SimulationDriver(small_parameters(), MockKernel())
        driver.execute()
        self.assertEqual(list(driver.metrics.as_dict()),
                         ["build_time", "run_time", "n_neurons", "n_synapses",
                          "rate_ex", "rate_in"])

    def test_run_benchmark_logs_report(self):
        with self.assertLogs("vabench", level="INFO") as cm:
            report = run_benchmark(small_parameters(), MockKernel())
        for line in report.splitlines():
            self.assertIn("INFO:vabench:%s" % line, cm.output)


if __name__ == '__main__':
    unittest.main()
