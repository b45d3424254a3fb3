# encoding: utf-8
"""
The experiment lifecycle: build the network, run the simulation, report.

Each phase may be entered once, in order::

    initial --build()--> built --run()--> done --report()--> text

Any error during a phase leaves the driver in the "failed" state, from which
no further phase can be entered and no report can be produced.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging

from . import errors
from .devices import DeviceWiring
from .kernel import ExecutionConfig
from .parameters import ParameterSet
from .report import Metrics, ReportGenerator, compute_rate
from .topology import TopologyBuilder
from .utility import Timer

logger = logging.getLogger("vabench")

INITIAL = "initial"
BUILT = "built"
DONE = "done"
FAILED = "failed"


class SimulationDriver(object):
    """
    Sequences the build and run phases of one experiment on a kernel.

    Arguments:
        `parameters`:
            a :class:`~vabench.parameters.ParameterSet`, or a dictionary
            accepted by :meth:`ParameterSet.from_dict`.
        `kernel`:
            a :class:`~vabench.kernel.Kernel`.
        `config`:
            the :class:`~vabench.kernel.ExecutionConfig` to apply to the
            kernel. Taken from `parameters` if not given.
        `allow_self_connections`:
            passed to :class:`~vabench.topology.TopologyBuilder`.
    """

    def __init__(self, parameters, kernel, config=None, allow_self_connections=True):
        self.parameters = parameters
        self.kernel = kernel
        self.config = config
        self.allow_self_connections = allow_self_connections
        self.phase = INITIAL
        self.timer = Timer()
        self.metrics = Metrics()
        self.network = None
        self.devices = None

    def _require(self, phase, action):
        if self.phase != phase:
            raise errors.PhaseError("Cannot %s: driver is in state '%s', expected '%s'"
                                    % (action, self.phase, phase))

    def _fail(self):
        self.phase = FAILED
        self.network = None
        self.devices = None

    def _resolve_parameters(self):
        if self.parameters is None:
            raise errors.ConfigurationError("No ParameterSet given: nothing to build")
        if not isinstance(self.parameters, ParameterSet):
            self.parameters = ParameterSet.from_dict(self.parameters)
        return self.parameters

    def build(self):
        """
        Configure the kernel, create populations, connections and devices.
        Stores the elapsed wall-clock time as the build time.
        """
        self._require(INITIAL, "build")
        try:
            parameters = self._resolve_parameters()
            with self.timer.phase("build"):
                if self.config is None:
                    self.config = ExecutionConfig.from_parameters(parameters)
                builder = TopologyBuilder(self.kernel, self.config, parameters,
                                          self.allow_self_connections)
                wiring = DeviceWiring(self.kernel, self.config, parameters)
                builder.check()
                wiring.check()
                logger.info("Building network on the %s kernel (%r)", self.kernel.name, self.config)
                self.kernel.configure(self.config)
                self.kernel.set_defaults(parameters.neuron_model)
                network = builder.build()
                devices = wiring.wire(network)
        except errors.ConfigurationError as err:
            logger.error("Invalid configuration: %s", err)
            self._fail()
            raise
        except Exception:
            self._fail()
            raise
        self.network = network
        self.devices = devices
        self.metrics.build_time = self.timer.get_mark("build")
        self.phase = BUILT
        logger.info("Network built in %s", Timer.time_in_words(self.metrics.build_time))

    def run(self):
        """
        Advance the simulation by the configured duration, in a single call.
        Stores the elapsed wall-clock time as the run time.
        """
        self._require(BUILT, "run")
        logger.info("Simulating %g ms", self.parameters.simtime)
        try:
            with self.timer.phase("run"):
                self.kernel.simulate(self.parameters.simtime)
        except Exception:
            self._fail()
            raise
        self.metrics.run_time = self.timer.get_mark("run")
        self.phase = DONE
        logger.info("Simulation finished in %s", Timer.time_in_words(self.metrics.run_time))

    def report(self):
        """Return the six-line summary of a completed experiment."""
        self._require(DONE, "report")
        metrics = self.metrics
        if not metrics.complete:
            p = self.parameters
            num_processes = self.kernel.num_processes()
            events_ex = self.kernel.get_recorder_state(self.devices.recorders["exc"]).n_events
            events_in = self.kernel.get_recorder_state(self.devices.recorders["inh"]).n_events
            metrics.n_neurons = self.network.n_neurons
            metrics.n_synapses = self.network.n_synapses + self.devices.n_connections
            metrics.rate_ex = compute_rate(events_ex, p.simtime, num_processes, p.n_rec)
            metrics.rate_in = compute_rate(events_in, p.simtime, num_processes, p.n_rec)
        return ReportGenerator(metrics).render()

    def execute(self):
        """Build, run and report. Returns the report text."""
        self.build()
        self.run()
        return self.report()


def run_benchmark(parameters, kernel, **driver_args):
    """
    Run one complete experiment on `kernel` and return the report text.

    No report is produced if either phase fails; the error propagates.
    """
    driver = SimulationDriver(parameters, kernel, **driver_args)
    report = driver.execute()
    for line in report.splitlines():
        logger.info(line)
    return report
