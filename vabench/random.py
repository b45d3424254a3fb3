"""
Provides a wrapper around the numpy random number generator, giving it the
interface used by the connectors and by the reference kernel.

Classes:
    NumpyRNG           - uses the numpy.random.RandomState RNG

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging

import numpy.random

try:
    from mpi4py import MPI
    mpi_rank = MPI.COMM_WORLD.rank
except ImportError:
    mpi_rank = 0

logger = logging.getLogger("vabench")


class AbstractRNG(object):
    """Abstract class for wrapping random number generators."""

    def __init__(self, seed=None):
        if seed is not None:
            assert isinstance(seed, int), "`seed` must be an int, not a %s" % type(seed).__name__
        self.seed = seed

    def sample_without_replacement(self, population_size, n):
        """
        Return `n` distinct integers drawn uniformly from
        ``range(population_size)``.
        """
        raise NotImplementedError


class NumpyRNG(AbstractRNG):
    """Wrapper for the numpy.random.RandomState class (Mersenne Twister PRNG).

    If `parallel_safe` is False, the seed is offset by the MPI rank so that
    different nodes draw different sequences.
    """

    def __init__(self, seed=None, parallel_safe=True):
        AbstractRNG.__init__(self, seed)
        self.parallel_safe = parallel_safe
        if self.seed is not None and not parallel_safe:
            self.seed += mpi_rank  # ensure different nodes get different sequences
            if mpi_rank != 0:
                logger.warning("Changing the seed to %s on node %d", self.seed, mpi_rank)
        self.rng = numpy.random.RandomState(self.seed)

    def sample_without_replacement(self, population_size, n):
        return self.rng.choice(population_size, size=n, replace=False)

    def __getattr__(self, name):
        """
        Give NumpyRNG the same methods as the wrapped numpy.random.RandomState.
        """
        if name == "rng":
            raise AttributeError(name)
        return getattr(self.rng, name)
