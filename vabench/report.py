"""
Benchmark metrics and the text report.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import quantities as pq

from . import errors


def compute_rate(n_events, simtime, num_processes, n_rec):
    """
    Approximate mean firing rate, in Hz, of the `n_rec` recorded neurons.

    `simtime` is the simulated duration in ms, the kernel time unit: the
    per-millisecond rate is scaled by 1000 to Hz here, so callers must not
    convert `simtime` to seconds beforehand.

    Each MPI process only sees the events of its local neurons, so the number
    of recorded neurons per process is estimated as ``n_rec / num_processes``.
    This is exact only when the recorded neurons are evenly distributed
    across processes.

        >>> compute_rate(1000, 1.0, 1, 500)
        2000.0
    """
    if n_rec <= 0 or simtime <= 0:
        return 0.0
    neurons_per_process = n_rec / num_processes
    rate = n_events / (neurons_per_process * simtime * pq.ms)
    return float(rate.rescale(pq.Hz).magnitude)


class Metrics(object):
    """
    Write-once benchmark results, filled in a fixed order:
    build time, run time, neuron count, synapse count, excitatory rate,
    inhibitory rate.
    """
    fields = ("build_time", "run_time", "n_neurons", "n_synapses", "rate_ex", "rate_in")

    def __init__(self):
        self._values = {}

    def __setattr__(self, name, value):
        if name not in self.fields:
            object.__setattr__(self, name, value)
            return
        if name in self._values:
            raise errors.PhaseError("Metric '%s' has already been set" % name)
        expected = self.fields[len(self._values)]
        if name != expected:
            raise errors.PhaseError("Metric '%s' set before '%s'" % (name, expected))
        self._values[name] = value

    def __getattr__(self, name):
        if name in self.fields:
            try:
                return self._values[name]
            except KeyError:
                raise AttributeError("Metric '%s' has not been set yet" % name)
        raise AttributeError(name)

    @property
    def complete(self):
        return len(self._values) == len(self.fields)

    def as_dict(self):
        return dict(self._values)


class ReportGenerator(object):
    """Formats complete :class:`Metrics` as the six-line benchmark summary."""

    template = ("Number of neurons : {n_neurons}\n"
                "Number of synapses: {n_synapses}\n"
                "Excitatory rate   : {rate_ex:.2f} Hz\n"
                "Inhibitory rate   : {rate_in:.2f} Hz\n"
                "Building time     : {build_time:.2f} s\n"
                "Simulation time   : {run_time:.2f} s")

    def __init__(self, metrics):
        self.metrics = metrics

    def render(self):
        if not self.metrics.complete:
            missing = [f for f in Metrics.fields if f not in self.metrics.as_dict()]
            raise errors.PhaseError("Cannot generate a report, missing metrics: %s"
                                    % ", ".join(missing))
        return self.template.format(**self.metrics.as_dict())
