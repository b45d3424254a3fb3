"""
Attachment of the stimulus source and the spike recorders.

The stimulus drives the first `n_stim` excitatory neurons; each population
gets a recorder observing its first `n_rec` neurons. Subsets are always taken
by creation index, so rebuilding an identical network selects the same
neurons.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging
import warnings

from . import errors
from .connectors import AllToAllConnector
from .topology import EXCITATORY

logger = logging.getLogger("vabench")


class Devices(object):
    """The devices created by :class:`DeviceWiring` and their connection count."""

    def __init__(self, stimulus, recorders, n_connections):
        self.stimulus = stimulus
        self.recorders = recorders
        self.n_connections = n_connections


class DeviceWiring(object):
    """
    Creates one stimulus source and one recorder per population, and
    connects them.
    """

    def __init__(self, kernel, config, parameters):
        self.kernel = kernel
        self.config = config
        self.parameters = parameters

    def check(self):
        """
        Validate subset sizes and stimulus timing against the population
        sizes, before anything is created.
        """
        p = self.parameters
        if p.n_stim < 0 or p.n_rec < 0:
            raise errors.ConfigurationError(
                "Device subset sizes must not be negative (n_stim=%d, n_rec=%d)"
                % (p.n_stim, p.n_rec))
        if p.n_stim > p.n_exc:
            raise errors.ConfigurationError(
                "n_stim (%d) exceeds the size of the excitatory population (%d)"
                % (p.n_stim, p.n_exc))
        for label, size in (("excitatory", p.n_exc), ("inhibitory", p.n_inh)):
            if p.n_rec > size:
                raise errors.ConfigurationError(
                    "n_rec (%d) exceeds the size of the %s population (%d)"
                    % (p.n_rec, label, size))
        stimulus = p.stimulus.parameters
        if "start" in stimulus and "stop" in stimulus and stimulus["stop"] < stimulus["start"]:
            raise errors.ConfigurationError(
                "Stimulus stop time (%g ms) is before its start time (%g ms)"
                % (stimulus["stop"], stimulus["start"]))

    def wire(self, network):
        """Create and connect the devices. Returns a :class:`Devices`."""
        self.check()
        p = self.parameters
        if p.recorder.parameters.get("record_to") == "ascii" and not self.config.overwrite_files:
            warnings.warn("Recording to file without overwrite_files: "
                          "the kernel will fail if output files already exist")
        kernel = self.kernel
        all_to_all = AllToAllConnector()

        logger.info("Connecting %s to the first %d excitatory neurons",
                    p.stimulus.native_name, p.n_stim)
        stimulus = kernel.create(p.stimulus, 1)
        kernel.set_status(stimulus, p.stimulus)
        n_connections = kernel.connect(stimulus, network.exc.first(p.n_stim).node_collection,
                                       all_to_all, EXCITATORY)

        logger.info("Recording spikes from the first %d neurons of each population", p.n_rec)
        recorders = {}
        for key, population in (("exc", network.exc), ("inh", network.inh)):
            recorder = kernel.create(p.recorder, 1)
            kernel.set_status(recorder, p.recorder)
            n_connections += kernel.connect(population.first(p.n_rec).node_collection, recorder,
                                            all_to_all)
            recorders[key] = recorder
        return Devices(stimulus, recorders, n_connections)
