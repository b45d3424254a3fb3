# -*- coding: utf-8 -*-
"""
An in-process reference kernel.

The mock kernel keeps track of nodes, synapse models and connections exactly
as a real kernel would, drawing random connectivity with the connectors'
own sampling, but it does not integrate any neuron dynamics: on
:meth:`MockKernel.simulate` each recorded neuron emits Poisson spikes at a
fixed rate. It is used for testing and for dry runs of the benchmark.

Distribution across MPI processes is emulated by assigning neurons to
processes round-robin by node id; a recorder only counts the events of the
neurons local to this kernel's `rank`, as a NEST recorder does.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging

import numpy as np

from .. import errors, models
from ..kernel import Kernel, RecorderState
from ..random import NumpyRNG
from .recording import spike_segment

logger = logging.getLogger("vabench")
name = "mock"


class NodeCollection(object):
    """An ordered, immutable collection of node ids."""

    def __init__(self, ids):
        self.ids = np.array(ids, dtype=int)
        self.ids.flags.writeable = False

    def __len__(self):
        return self.ids.size

    def __iter__(self):
        return iter(int(i) for i in self.ids)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return NodeCollection(self.ids[item])
        return int(self.ids[item])

    def __eq__(self, other):
        return isinstance(other, NodeCollection) and np.array_equal(self.ids, other.ids)

    __hash__ = None

    def __repr__(self):
        if len(self) == 0:
            return "NodeCollection()"
        return "NodeCollection(first=%d, last=%d)" % (self.ids[0], self.ids[-1])


class ConnectionBlock(object):
    """Connections created by one call to :meth:`MockKernel.connect`."""

    def __init__(self, sources, targets, synapse_model, rule):
        self.sources = sources
        self.targets = targets
        self.synapse_model = synapse_model
        self.rule = rule

    def __len__(self):
        return self.sources.size


class MockKernel(Kernel):
    """
    Reference implementation of :class:`~vabench.kernel.Kernel`.

    `num_processes` and `rank` emulate the position of this kernel in an
    MPI job. `firing_rate` (Hz) is the rate of the random spikes emitted by
    recorded neurons.
    """

    name = name

    def __init__(self, num_processes=1, rank=0, firing_rate=5.0):
        if not 0 <= rank < num_processes:
            raise ValueError("rank must lie in [0, num_processes)")
        self._num_processes = num_processes
        self.rank = rank
        self.firing_rate = firing_rate
        self.config = None
        self.rng = None
        self.t = 0.0
        self._next_id = 1
        self._model_of = np.zeros(0, dtype=object)
        self._status = {}
        self.defaults = dict((native_name, dict(cls.default_parameters))
                             for native_name, cls in models.standard_models.items()
                             if not issubclass(cls, models.BaseSynapseType))
        self.synapse_models = dict((native_name, dict(cls.default_parameters))
                                   for native_name, cls in models.standard_models.items()
                                   if issubclass(cls, models.BaseSynapseType))
        self.connections = []
        self.events = {}

    # --- set-up ---------------------------------------------------------------

    def configure(self, config):
        if self.config is not None:
            raise errors.KernelError("The kernel has already been configured")
        if self._next_id > 1:
            raise errors.KernelError("The kernel must be configured before nodes are created")
        self.config = config
        self.rng = NumpyRNG(seed=config.rng_seed)
        logger.debug("Mock kernel configured: %r", config)

    def _check_configured(self):
        if self.config is None:
            raise errors.KernelError("The kernel has not been configured")

    def set_defaults(self, model):
        self._check_configured()
        if model.native_name not in self.defaults:
            raise errors.InvalidModelError("Unknown model '%s'" % model.native_name)
        self.defaults[model.native_name].update(model.native_parameters)

    def create(self, model, n):
        self._check_configured()
        if model.native_name not in self.defaults:
            raise errors.InvalidModelError("Unknown model '%s'" % model.native_name)
        if n < 0:
            raise errors.KernelError("Cannot create a negative number of nodes")
        ids = np.arange(self._next_id, self._next_id + n)
        self._next_id += n
        self._model_of = np.concatenate((self._model_of, np.array([type(model)] * n, dtype=object)))
        for i in ids:
            self._status[int(i)] = dict(self.defaults[model.native_name])
        return NodeCollection(ids)

    def model_of(self, node_id):
        """Return the model class of a node."""
        if not 0 < node_id < self._next_id:
            raise errors.KernelError("Unknown node %d" % node_id)
        return self._model_of[node_id - 1]

    def set_status(self, handle, model):
        for node_id in handle:
            if self.model_of(node_id) is not type(model):
                raise errors.KernelError("Node %d is not a %s" % (node_id, model.native_name))
            self._status[node_id].update(model.native_parameters)

    def get_status(self, node_id):
        """Return the parameters of a node."""
        self.model_of(node_id)
        return dict(self._status[node_id])

    def copy_model(self, synapse, new_name):
        self._check_configured()
        if synapse.native_name not in self.synapse_models:
            raise errors.InvalidModelError("Unknown synapse model '%s'" % synapse.native_name)
        if new_name in self.synapse_models or new_name in self.defaults:
            raise errors.KernelError("Model '%s' already exists" % new_name)
        parameters = dict(self.synapse_models[synapse.native_name])
        parameters.update(synapse.native_parameters)
        if parameters["delay"] < self.config.resolution:
            raise errors.KernelError("Delay %g is smaller than the resolution %g"
                                     % (parameters["delay"], self.config.resolution))
        self.synapse_models[new_name] = parameters

    # --- connectivity ---------------------------------------------------------

    def connect(self, pre, post, connector, synapse_model=None):
        self._check_configured()
        synapse_model = synapse_model or "static_synapse"
        if synapse_model not in self.synapse_models:
            raise errors.InvalidModelError("Unknown synapse model '%s'" % synapse_model)
        if self.t > 0:
            raise errors.KernelError("Connections cannot be created after the simulation has run")
        recurrent = pre == post
        try:
            sources, targets = connector.sample(len(pre), len(post), self.rng, recurrent)
        except errors.ConfigurationError as err:
            raise errors.KernelError(str(err)) from err
        block = ConnectionBlock(pre.ids[sources], post.ids[targets], synapse_model,
                                connector.rule_params())
        self.connections.append(block)
        return len(block)

    def get_connections(self, synapse_model=None, target=None):
        """
        Return `(sources, targets)` arrays of all connections, optionally
        restricted to one synapse model or to the given target nodes.
        """
        blocks = [b for b in self.connections
                  if synapse_model is None or b.synapse_model == synapse_model]
        if not blocks:
            return np.zeros(0, dtype=int), np.zeros(0, dtype=int)
        sources = np.concatenate([b.sources for b in blocks])
        targets = np.concatenate([b.targets for b in blocks])
        if target is not None:
            mask = np.isin(targets, np.asarray(list(target)))
            sources, targets = sources[mask], targets[mask]
        return sources, targets

    @property
    def num_connections(self):
        return sum(len(b) for b in self.connections)

    # --- running --------------------------------------------------------------

    def is_local(self, node_ids):
        return node_ids % self._num_processes == self.rank

    def simulate(self, simtime):
        self._check_configured()
        if simtime < 0:
            raise errors.KernelError("Cannot simulate a negative time (%g ms)" % simtime)
        t_start = self.t
        self.t += simtime
        for node_id in range(1, self._next_id):
            if self._model_of[node_id - 1] is not models.SpikeRecorder:
                continue
            observed, _ = self.get_connections(target=[node_id])
            observed = np.unique(observed)
            observed = observed[self.is_local(observed)]
            counts = self.rng.poisson(self.firing_rate * simtime / 1000.0, size=observed.size)
            senders = np.repeat(observed, counts)
            times = self.rng.uniform(t_start, self.t, size=senders.size)
            previous = self.events.get(node_id, (np.zeros(0, dtype=int), np.zeros(0)))
            self.events[node_id] = (np.concatenate((previous[0], senders)),
                                    np.concatenate((previous[1], times)))
        logger.debug("Mock kernel advanced to t = %g ms", self.t)

    # --- queries --------------------------------------------------------------

    def _recorder_id(self, handle):
        if len(handle) != 1:
            raise errors.KernelError("Expected a single recording device, got %d nodes"
                                     % len(handle))
        node_id = handle[0]
        if self.model_of(node_id) is not models.SpikeRecorder:
            raise errors.KernelError("Node %d is not a recording device" % node_id)
        return node_id

    def get_recorder_state(self, handle):
        node_id = self._recorder_id(handle)
        senders, _ = self.events.get(node_id, (np.zeros(0, dtype=int), np.zeros(0)))
        return RecorderState(n_events=int(senders.size))

    def get_data(self, handle):
        """Return the spikes of a recorder as a :class:`neo.Segment`."""
        node_id = self._recorder_id(handle)
        observed, _ = self.get_connections(target=[node_id])
        observed = np.unique(observed)
        senders, times = self.events.get(node_id, (np.zeros(0, dtype=int), np.zeros(0)))
        return spike_segment(observed[self.is_local(observed)], senders, times, self.t,
                             label=self._status[node_id].get("label") or "recorder%d" % node_id)

    def num_processes(self):
        return self._num_processes
