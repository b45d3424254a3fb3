# encoding: utf-8
"""
The interface between the benchmark and a simulation kernel.

The kernel performs the numerical integration of neuron and synapse dynamics
and the delivery of spike events, possibly across several MPI processes.
The benchmark only ever talks to it through the methods of :class:`Kernel`,
in a strictly sequential order: configure, create, connect, simulate, query.

Backend-specific subclasses live in :mod:`vabench.mock` (an in-process
reference kernel) and :mod:`vabench.nest` (PyNEST).

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from abc import ABC, abstractmethod
from collections import namedtuple

from . import errors

DEFAULT_TIMESTEP = 0.1


class ExecutionConfig(object):
    """
    Kernel-wide settings, applied once before any node is created.

    `resolution`:
        integration time step in ms.
    `threads`:
        number of threads per MPI process.
    `overwrite_files`:
        whether recording devices may overwrite existing output files.
    `rng_seed`:
        seed for the kernel's random number generators, or None.
    """

    def __init__(self, resolution=DEFAULT_TIMESTEP, threads=1, overwrite_files=True,
                 rng_seed=None):
        if resolution <= 0:
            raise errors.ConfigurationError("resolution must be positive (got %g)" % resolution)
        if threads < 1:
            raise errors.ConfigurationError("threads must be at least 1 (got %d)" % threads)
        self.resolution = float(resolution)
        self.threads = int(threads)
        self.overwrite_files = bool(overwrite_files)
        self.rng_seed = rng_seed

    @classmethod
    def from_parameters(cls, parameters):
        return cls(resolution=parameters.resolution,
                   threads=parameters.threads,
                   overwrite_files=parameters.overwrite_files,
                   rng_seed=parameters.rng_seed)

    def __repr__(self):
        return "ExecutionConfig(resolution=%g, threads=%d, overwrite_files=%s, rng_seed=%s)" % (
            self.resolution, self.threads, self.overwrite_files, self.rng_seed)


RecorderState = namedtuple("RecorderState", ["n_events"])


class Kernel(ABC):
    """
    Capability interface of a simulation kernel.

    Node handles returned by :meth:`create` are opaque to the benchmark
    apart from supporting ``len()`` and slicing from the start
    (``handle[:n]``), which selects the first `n` nodes by creation index.
    """

    name = None

    @abstractmethod
    def configure(self, config):
        """Apply an :class:`ExecutionConfig`. Called once, before any node is created."""

    @abstractmethod
    def set_defaults(self, model):
        """Make the parameters of `model` the defaults for its kernel model."""

    @abstractmethod
    def create(self, model, n):
        """Create `n` nodes of the kernel model of `model`; return their handle."""

    @abstractmethod
    def set_status(self, handle, model):
        """Set the parameters of the nodes in `handle` from `model`."""

    @abstractmethod
    def copy_model(self, synapse, new_name):
        """
        Register a synapse class `new_name`, derived from the kernel model of
        `synapse` and carrying its parameters.
        """

    @abstractmethod
    def connect(self, pre, post, connector, synapse_model=None):
        """
        Connect node handles `pre` to `post` following `connector`, using the
        synapse class named `synapse_model` (the kernel's default static
        synapse if None). Return the number of connections created.
        """

    @abstractmethod
    def simulate(self, simtime):
        """Advance the simulation by `simtime` ms. Blocks until done."""

    @abstractmethod
    def get_recorder_state(self, handle):
        """Return the :class:`RecorderState` of a recording device."""

    @abstractmethod
    def num_processes(self):
        """Return the number of MPI processes the kernel is distributed across."""
