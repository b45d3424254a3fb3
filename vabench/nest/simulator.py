# -*- coding: utf-8 -*-
"""
Implementation of the kernel interface for the NEST simulator.

Every call into PyNEST is wrapped so that a `nest.NESTError` surfaces as a
:class:`~vabench.errors.KernelError`.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import functools
import logging

import nest

from .. import errors
from ..core import reraise
from ..kernel import Kernel, RecorderState

logger = logging.getLogger("vabench")
name = "NEST"


def translate_errors(method):
    """Re-raise NEST errors raised by `method` as KernelError."""

    @functools.wraps(method)
    def wrapped(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except nest.NESTError as err:
            reraise(err, " (in NESTKernel.%s)" % method.__name__, errors.KernelError)
    return wrapped


class NESTKernel(Kernel):
    """
    Adapter from :class:`~vabench.kernel.Kernel` to PyNEST.

    `verbosity` is one of: "all", "info", "deprecated", "warning", "error",
    "fatal".
    """

    name = name

    def __init__(self, verbosity="error"):
        self.verbosity = verbosity
        self.config = None

    @translate_errors
    def configure(self, config):
        nest.set_verbosity('M_{}'.format(self.verbosity.upper()))
        nest.ResetKernel()
        kernel_status = {'resolution': config.resolution,
                         'local_num_threads': config.threads,
                         'overwrite_files': config.overwrite_files}
        if config.rng_seed is not None:
            kernel_status['rng_seed'] = config.rng_seed
        nest.SetKernelStatus(kernel_status)
        self.config = config
        logger.debug("NEST kernel status set to %s", kernel_status)

    @translate_errors
    def set_defaults(self, model):
        nest.SetDefaults(model.native_name, model.native_parameters)

    @translate_errors
    def create(self, model, n):
        return nest.Create(model.native_name, n)

    @translate_errors
    def set_status(self, handle, model):
        nest.SetStatus(handle, model.native_parameters)

    @translate_errors
    def copy_model(self, synapse, new_name):
        nest.CopyModel(synapse.native_name, new_name, synapse.native_parameters)

    @translate_errors
    def connect(self, pre, post, connector, synapse_model=None):
        syn_spec = None
        if synapse_model is not None:
            syn_spec = {'synapse_model': synapse_model}
        nest.Connect(pre, post, conn_spec=connector.rule_params(), syn_spec=syn_spec)
        return connector.n_connections(len(pre), len(post), recurrent=pre == post)

    @translate_errors
    def simulate(self, simtime):
        nest.Simulate(simtime)

    @translate_errors
    def get_recorder_state(self, handle):
        return RecorderState(n_events=int(nest.GetStatus(handle, 'n_events')[0]))

    @translate_errors
    def num_processes(self):
        return nest.NumProcesses()
