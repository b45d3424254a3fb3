# encoding: utf-8
"""
Construction of the balanced random network: an excitatory and an inhibitory
population, recurrently connected by four fixed-indegree blocks.

    E → E, E → I : in-degree CE = round(NE·ε), excitatory synapse class
    I → E, I → I : in-degree CI = round(NI·ε), inhibitory synapse class

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging

from . import errors
from .connectors import FixedInDegreeConnector
from .populations import Population

logger = logging.getLogger("vabench")

EXCITATORY = "excitatory"
INHIBITORY = "inhibitory"


def indegrees(n_exc, n_inh, epsilon):
    """
    Return the in-degrees `(CE, CI)` for connection density `epsilon`.

    Values are rounded to the nearest integer with Python's :func:`round`.
    """
    if n_exc < 0 or n_inh < 0:
        raise errors.ConfigurationError(
            "Population sizes must not be negative (n_exc=%d, n_inh=%d)" % (n_exc, n_inh))
    if not 0.0 <= epsilon <= 1.0:
        raise errors.ConfigurationError("epsilon must lie in [0, 1] (got %g)" % epsilon)
    return int(round(n_exc * epsilon)), int(round(n_inh * epsilon))


class Projection(object):
    """
    A block of connections from one population to another, created in the
    kernel on construction and never modified afterwards.
    """

    def __init__(self, pre, post, connector, synapse_model, label=None):
        self.pre = pre
        self.post = post
        self.connector = connector
        self.synapse_model = synapse_model
        self.label = label or "%s→%s" % (pre.label, post.label)
        self.size = pre.kernel.connect(pre.node_collection, post.node_collection,
                                       connector, synapse_model)
        logger.debug("%s: %d connections (%r, %s)", self.label, self.size,
                     connector, synapse_model)

    def __len__(self):
        return self.size


class Network(object):
    """The populations and projections created by :class:`TopologyBuilder`."""

    def __init__(self, exc, inh, CE, CI, projections):
        self.exc = exc
        self.inh = inh
        self.CE = CE
        self.CI = CI
        self.projections = projections

    @property
    def n_neurons(self):
        return self.exc.size + self.inh.size

    @property
    def n_synapses(self):
        return sum(len(prj) for prj in self.projections.values())


class TopologyBuilder(object):
    """
    Creates the two populations and the recurrent connectivity.

    Arguments:
        `kernel`:
            a :class:`~vabench.kernel.Kernel`, already configured with `config`
            and with neuron model defaults set.
        `config`:
            the :class:`~vabench.kernel.ExecutionConfig` applied to the kernel.
        `parameters`:
            a :class:`~vabench.parameters.ParameterSet`.
        `allow_self_connections`:
            whether a neuron may be drawn as one of its own sources in the
            E → E and I → I blocks.
    """

    def __init__(self, kernel, config, parameters, allow_self_connections=True):
        self.kernel = kernel
        self.config = config
        self.parameters = parameters
        self.allow_self_connections = allow_self_connections

    def check(self):
        """
        Validate sizes, in-degrees and delay before anything is created.
        Returns `(CE, CI)`.
        """
        p = self.parameters
        CE, CI = indegrees(p.n_exc, p.n_inh, p.epsilon)
        if p.delay < self.config.resolution:
            raise errors.ConfigurationError(
                "Synaptic delay (%g ms) must not be shorter than the resolution (%g ms)"
                % (p.delay, self.config.resolution))
        for pre_size, post_size, n, recurrent in ((p.n_exc, p.n_exc, CE, True),
                                                  (p.n_exc, p.n_inh, CE, False),
                                                  (p.n_inh, p.n_exc, CI, False),
                                                  (p.n_inh, p.n_inh, CI, True)):
            FixedInDegreeConnector(n, self.allow_self_connections).check(pre_size, post_size,
                                                                         recurrent)
        return CE, CI

    def build(self):
        """Create populations, synapse classes and connections. Returns a :class:`Network`."""
        p = self.parameters
        CE, CI = self.check()
        logger.info("Creating populations: %d excitatory, %d inhibitory %s neurons",
                    p.n_exc, p.n_inh, p.neuron_model.native_name)
        exc = Population(self.kernel, p.n_exc, p.neuron_model, label="excitatory")
        inh = Population(self.kernel, p.n_inh, p.neuron_model, label="inhibitory")

        self.kernel.copy_model(p.excitatory_synapse, EXCITATORY)
        self.kernel.copy_model(p.inhibitory_synapse, INHIBITORY)

        logger.info("Connecting populations: CE=%d, CI=%d", CE, CI)
        exc_conn = FixedInDegreeConnector(CE, self.allow_self_connections)
        inh_conn = FixedInDegreeConnector(CI, self.allow_self_connections)
        projections = {}
        projections['e2e'] = Projection(exc, exc, exc_conn, EXCITATORY, label="E→E")
        projections['e2i'] = Projection(exc, inh, exc_conn, EXCITATORY, label="E→I")
        projections['i2e'] = Projection(inh, exc, inh_conn, INHIBITORY, label="I→E")
        projections['i2i'] = Projection(inh, inh, inh_conn, INHIBITORY, label="I→I")
        return Network(exc, inh, CE, CI, projections)
