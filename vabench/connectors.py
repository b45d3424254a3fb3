"""
Connection rules.

A connector describes how a block of connections between a pre-synaptic and
a post-synaptic population is generated. Kernels that generate connectivity
themselves (NEST) use :meth:`Connector.rule_params`; the reference kernel
draws the connections with :meth:`Connector.sample`.

Classes:
    FixedInDegreeConnector
    AllToAllConnector

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging

import numpy as np

from . import errors

logger = logging.getLogger("vabench")


class Connector(object):
    """Base class for connectors."""

    def __init__(self, allow_self_connections=True):
        if not isinstance(allow_self_connections, bool):
            raise errors.ConfigurationError(
                "allow_self_connections must be True or False, not %r" % (allow_self_connections,))
        self.allow_self_connections = allow_self_connections

    def check(self, pre_size, post_size, recurrent=False):
        """
        Raise :class:`ConfigurationError` if the rule cannot be realised
        between populations of the given sizes. `recurrent` is True when the
        pre- and post-synaptic populations are the same.
        """
        if pre_size < 0 or post_size < 0:
            raise errors.ConfigurationError("Population sizes must not be negative")

    def n_connections(self, pre_size, post_size, recurrent=False):
        """Number of connections the rule creates."""
        raise NotImplementedError

    def rule_params(self):
        """Connection specification in the form used by NEST."""
        raise NotImplementedError

    def sample(self, pre_size, post_size, rng, recurrent=False):
        """
        Return `(sources, targets)`, two integer arrays of population indices,
        one entry per connection.
        """
        raise NotImplementedError


class AllToAllConnector(Connector):
    """
    Connects every pre-synaptic neuron to every post-synaptic neuron.
    """

    def n_connections(self, pre_size, post_size, recurrent=False):
        if recurrent and not self.allow_self_connections:
            return pre_size * (post_size - 1)
        return pre_size * post_size

    def rule_params(self):
        return {'rule': 'all_to_all',
                'allow_autapses': self.allow_self_connections}

    def sample(self, pre_size, post_size, rng=None, recurrent=False):
        self.check(pre_size, post_size, recurrent)
        sources = np.tile(np.arange(pre_size), post_size)
        targets = np.repeat(np.arange(post_size), pre_size)
        if recurrent and not self.allow_self_connections:
            mask = sources != targets
            sources, targets = sources[mask], targets[mask]
        return sources, targets


class FixedInDegreeConnector(Connector):
    """
    Each post-synaptic neuron is connected to exactly `n` pre-synaptic
    neurons chosen at random.

    The `n` sources of a given target are distinct (no multiple connections
    between the same pair); the samples of different targets are drawn
    independently. If the connector is used to connect a population to
    itself, `allow_self_connections` determines whether a neuron may be one
    of its own sources.
    """

    def __init__(self, n, allow_self_connections=True):
        Connector.__init__(self, allow_self_connections)
        if isinstance(n, (bool, float)) or not isinstance(n, (int, np.integer)):
            raise errors.ConfigurationError("In-degree must be an integer, not %r" % (n,))
        if n < 0:
            raise errors.ConfigurationError("In-degree must not be negative (got %d)" % n)
        self.n = int(n)

    def __repr__(self):
        return "FixedInDegreeConnector(n=%d, allow_self_connections=%s)" % (
            self.n, self.allow_self_connections)

    def pool_size(self, pre_size, recurrent=False):
        """Number of candidate sources available to each target."""
        if recurrent and not self.allow_self_connections:
            return max(pre_size - 1, 0)
        return pre_size

    def check(self, pre_size, post_size, recurrent=False):
        Connector.check(self, pre_size, post_size, recurrent)
        pool = self.pool_size(pre_size, recurrent)
        if self.n > pool and post_size > 0:
            raise errors.ConfigurationError(
                "In-degree %d exceeds the number of available sources (%d)" % (self.n, pool))

    def n_connections(self, pre_size, post_size, recurrent=False):
        return self.n * post_size

    def rule_params(self):
        return {'rule': 'fixed_indegree',
                'indegree': self.n,
                'allow_autapses': self.allow_self_connections,
                'allow_multapses': False}

    def sample(self, pre_size, post_size, rng, recurrent=False):
        self.check(pre_size, post_size, recurrent)
        exclude_self = recurrent and not self.allow_self_connections
        pool = self.pool_size(pre_size, recurrent)
        sources = np.empty((post_size, self.n), dtype=int)
        for tgt in range(post_size):
            chosen = rng.sample_without_replacement(pool, self.n)
            if exclude_self:
                # draw from the pool with the target removed, then shift back
                chosen = chosen + (chosen >= tgt)
            sources[tgt] = chosen
        targets = np.repeat(np.arange(post_size), self.n)
        logger.debug("Sampled %d connections (in-degree %d onto %d targets)",
                     targets.size, self.n, post_size)
        return sources.ravel(), targets
