"""
The parameter set of a benchmark experiment.

A :class:`ParameterSet` gathers every value the build and run phases consume:
execution settings, population sizes, connection density, the typed neuron,
synapse, stimulus and recorder records, and the simulated duration.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging

from . import errors, models

logger = logging.getLogger("vabench")


REQUIRED_KEYS = ("resolution", "threads", "n_exc", "n_inh", "epsilon",
                 "n_stim", "n_rec", "weight_ex", "weight_in", "delay", "simtime")

# Vogels & Abbott (2005) COBA network, as in benchmark 1 of Brette et al. (2007)
DEFAULTS = {
    "resolution": 0.1,     # ms
    "threads": 1,
    "rng_seed": 98765,
    "overwrite_files": True,
    "n_exc": 3200,
    "n_inh": 800,
    "epsilon": 0.02,
    "neuron_model": "iaf_cond_exp",
    "neuron_params": {},
    "stimulus_model": "poisson_generator",
    "stimulus_params": {"rate": 100.0, "start": 0.0, "stop": 50.0},
    "n_stim": 500,
    "recorder_model": "spike_recorder",
    "recorder_params": {},
    "n_rec": 500,
    "synapse_model": "static_synapse",
    "weight_ex": 4.0,      # nS
    "weight_in": -51.0,    # nS, negative for the inhibitory receptor
    "delay": 0.2,          # ms
    "simtime": 1000.0,     # ms
}


class ParameterSet(object):
    """
    Model, connectivity, device and timing parameters for one experiment.

    Scalar values are converted to their expected types on construction;
    range checks (population sizes, degrees, subset counts) are made by the
    components that use the values.
    """

    def __init__(self, resolution, threads, n_exc, n_inh, epsilon, n_stim, n_rec,
                 weight_ex, weight_in, delay, simtime,
                 neuron_model=None, stimulus=None, recorder=None,
                 synapse_model=models.StaticSynapse, rng_seed=None,
                 overwrite_files=True):
        try:
            self.resolution = float(resolution)
            self.threads = int(threads)
            self.n_exc = int(n_exc)
            self.n_inh = int(n_inh)
            self.epsilon = float(epsilon)
            self.n_stim = int(n_stim)
            self.n_rec = int(n_rec)
            self.weight_ex = float(weight_ex)
            self.weight_in = float(weight_in)
            self.delay = float(delay)
            self.simtime = float(simtime)
            self.rng_seed = _as_seed(rng_seed)
        except (TypeError, ValueError) as err:
            raise errors.ConfigurationError("Invalid parameter value: %s" % err)
        self.neuron_model = neuron_model or models.IafCondExp()
        self.stimulus = stimulus or models.PoissonGenerator()
        self.recorder = recorder or models.SpikeRecorder()
        self.synapse_model = synapse_model
        self.overwrite_files = bool(overwrite_files)

    @classmethod
    def from_dict(cls, parameters):
        """
        Build a ParameterSet from a flat dictionary such as :data:`DEFAULTS`.

        Keys in :data:`REQUIRED_KEYS` must be present. A `scale` entry, if
        given, multiplies both population sizes and the sizes of the
        stimulated and recorded subsets.
        """
        if not parameters:
            raise errors.ConfigurationError("No parameters given")
        for key in REQUIRED_KEYS:
            if key not in parameters:
                raise errors.ConfigurationError("Missing parameter '%s'" % key)
        unknown = set(parameters) - set(DEFAULTS) - {"scale"}
        if unknown:
            raise errors.ConfigurationError("Unknown parameter(s): %s" % ", ".join(sorted(unknown)))
        get = lambda key: parameters.get(key, DEFAULTS[key])  # noqa: E731

        neuron_model = _build_model(get("neuron_model"), get("neuron_params"),
                                    models.BaseCellType)
        stimulus = _build_model(get("stimulus_model"), get("stimulus_params"),
                                models.BaseStimulusType)
        recorder = _build_model(get("recorder_model"), get("recorder_params"),
                                models.BaseRecorderType)
        synapse_model = models.get_model_class(get("synapse_model"), models.BaseSynapseType)

        sizes = dict((key, parameters[key]) for key in ("n_exc", "n_inh", "n_stim", "n_rec"))
        scale = parameters.get("scale", 1.0)
        if scale != 1.0:
            for key, value in sizes.items():
                sizes[key] = int(round(value * scale))
            logger.debug("Scaled network size by %g: %s", scale, sizes)

        return cls(resolution=parameters["resolution"],
                   threads=parameters["threads"],
                   n_exc=sizes["n_exc"],
                   n_inh=sizes["n_inh"],
                   epsilon=parameters["epsilon"],
                   n_stim=sizes["n_stim"],
                   n_rec=sizes["n_rec"],
                   weight_ex=parameters["weight_ex"],
                   weight_in=parameters["weight_in"],
                   delay=parameters["delay"],
                   simtime=parameters["simtime"],
                   neuron_model=neuron_model,
                   stimulus=stimulus,
                   recorder=recorder,
                   synapse_model=synapse_model,
                   rng_seed=get("rng_seed"),
                   overwrite_files=get("overwrite_files"))

    @classmethod
    def default(cls, scale=1.0, **overrides):
        """The Vogels-Abbott parameters, optionally scaled and overridden."""
        parameters = dict(DEFAULTS)
        parameters.update(overrides)
        parameters["scale"] = scale
        return cls.from_dict(parameters)

    @property
    def excitatory_synapse(self):
        """Parameter record of the excitatory synapse class."""
        return self.synapse_model(weight=self.weight_ex, delay=self.delay)

    @property
    def inhibitory_synapse(self):
        """Parameter record of the inhibitory synapse class."""
        return self.synapse_model(weight=self.weight_in, delay=self.delay)

    @property
    def n_neurons(self):
        return self.n_exc + self.n_inh

    def as_dict(self):
        return {
            "resolution": self.resolution,
            "threads": self.threads,
            "rng_seed": self.rng_seed,
            "overwrite_files": self.overwrite_files,
            "n_exc": self.n_exc,
            "n_inh": self.n_inh,
            "epsilon": self.epsilon,
            "neuron_model": self.neuron_model.native_name,
            "neuron_params": self.neuron_model.native_parameters,
            "stimulus_model": self.stimulus.native_name,
            "stimulus_params": self.stimulus.native_parameters,
            "n_stim": self.n_stim,
            "recorder_model": self.recorder.native_name,
            "recorder_params": self.recorder.native_parameters,
            "n_rec": self.n_rec,
            "synapse_model": self.synapse_model.native_name,
            "weight_ex": self.weight_ex,
            "weight_in": self.weight_in,
            "delay": self.delay,
            "simtime": self.simtime,
        }

    def __repr__(self):
        return "ParameterSet(n_exc=%d, n_inh=%d, epsilon=%g, simtime=%g)" % (
            self.n_exc, self.n_inh, self.epsilon, self.simtime)


def _build_model(native_name, parameters, base_class):
    cls = models.get_model_class(native_name, base_class)
    try:
        return cls(**(parameters or {}))
    except errors.NonExistentParameterError as err:
        raise errors.ConfigurationError(str(err))


def _as_seed(value):
    """Return `value` as a non-negative int seed, or None."""
    if value is None:
        return None
    seed = int(value)
    if isinstance(value, bool) or (not isinstance(value, str) and seed != value) or seed < 0:
        raise errors.ConfigurationError("rng_seed must be a non-negative integer, not %r" % (value,))
    return seed
