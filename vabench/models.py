"""
Typed parameter records for the neuron, synapse, stimulus and recorder models
used by the benchmark.

Each model class names the kernel model it stands for (`native_name`) and
lists its parameters with their default values. Instances hold a complete,
validated parameter record, so the kernel adapters never see arbitrary
dictionaries.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from copy import deepcopy

from . import errors


class BaseModelType(object):
    """Base class for neuron, synapse and device model classes."""
    native_name = None
    default_parameters = {}
    parameter_checks = {}

    def __init__(self, **parameters):
        self.parameters = deepcopy(self.default_parameters)
        if parameters:
            self.update(**parameters)

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__,
                           ", ".join("%s=%r" % item for item in sorted(self.parameters.items())))

    def __eq__(self, other):
        return type(self) is type(other) and self.parameters == other.parameters

    @classmethod
    def has_parameter(cls, name):
        """Does this model have a parameter with the given name?"""
        return name in cls.default_parameters

    @classmethod
    def get_parameter_names(cls):
        """Return the names of the parameters of this model."""
        return list(cls.default_parameters.keys())

    def get_schema(self):
        """
        Returns the model schema: i.e. a mapping of parameter names to allowed
        parameter types.
        """
        return dict((name, type(value))
                    for name, value in self.default_parameters.items())

    def update(self, **parameters):
        """Set one or more parameters, checking names, types and values."""
        schema = self.get_schema()
        for name, value in parameters.items():
            if name not in schema:
                raise errors.NonExistentParameterError(name, self.__class__.__name__,
                                                       self.get_parameter_names())
            try:
                value = schema[name](value)
            except (TypeError, ValueError):
                raise errors.ConfigurationError(
                    "%s.%s must be of type %s, not %r" % (self.__class__.__name__, name,
                                                          schema[name].__name__, value))
            if name in self.parameter_checks:
                check, description = self.parameter_checks[name]
                if not check(value):
                    raise errors.ConfigurationError(
                        "%s.%s = %r: %s" % (self.__class__.__name__, name, value, description))
            self.parameters[name] = value

    @property
    def native_parameters(self):
        """A copy of the parameter record, keyed by kernel parameter names."""
        return dict(self.parameters)


def _positive(value):
    return value > 0


def _non_negative(value):
    return value >= 0


class BaseCellType(BaseModelType):
    """Base class for neuron model classes."""
    pass


class BaseSynapseType(BaseModelType):
    """Base class for synapse model classes."""
    pass


class BaseStimulusType(BaseModelType):
    """Base class for stimulus (spike source) device classes."""
    pass


class BaseRecorderType(BaseModelType):
    """Base class for recording device classes."""
    pass


class IafCondExp(BaseCellType):
    """
    Leaky integrate and fire model with fixed threshold and
    exponentially-decaying post-synaptic conductance.

    Defaults are those of the COBA network of Vogels & Abbott (2005).
    """
    native_name = "iaf_cond_exp"
    default_parameters = {
        'V_th':       -50.0,  # Spike threshold in mV.
        'V_reset':    -60.0,  # Reset potential after a spike in mV.
        'E_L':        -60.0,  # Leak reversal potential in mV.
        'C_m':        200.0,  # Capacity of the membrane in pF.
        'g_L':         10.0,  # Leak conductance in nS.
        't_ref':        5.0,  # Duration of refractory period in ms.
        'tau_syn_ex':   5.0,  # Decay time of the excitatory conductance in ms.
        'tau_syn_in':  10.0,  # Decay time of the inhibitory conductance in ms.
        'E_ex':         0.0,  # Excitatory reversal potential in mV.
        'E_in':       -80.0,  # Inhibitory reversal potential in mV.
        'I_e':          0.0,  # Offset current in pA.
    }
    parameter_checks = {
        'C_m': (_positive, "membrane capacitance must be positive"),
        't_ref': (_non_negative, "refractory period must not be negative"),
        'tau_syn_ex': (_positive, "time constants must be positive"),
        'tau_syn_in': (_positive, "time constants must be positive"),
    }


class IafPscAlpha(BaseCellType):
    """
    Leaky integrate and fire model with alpha-shaped post-synaptic currents.
    """
    native_name = "iaf_psc_alpha"
    default_parameters = {
        'V_th':        20.0,
        'V_reset':      0.0,
        'E_L':          0.0,
        'C_m':        250.0,
        'tau_m':       10.0,
        't_ref':        2.0,
        'tau_syn_ex':   0.5,
        'tau_syn_in':   0.5,
        'I_e':          0.0,
    }
    parameter_checks = {
        'C_m': (_positive, "membrane capacitance must be positive"),
        'tau_m': (_positive, "time constants must be positive"),
    }


class StaticSynapse(BaseSynapseType):
    """
    Synaptic connection with fixed weight and delay. The sign of the weight
    selects the excitatory or inhibitory receptor.
    """
    native_name = "static_synapse"
    default_parameters = {
        'weight': 1.0,  # nS for conductance-based, pA for current-based neurons
        'delay':  1.0,  # ms
    }
    parameter_checks = {
        'delay': (_positive, "synaptic delay must be positive"),
    }


class PoissonGenerator(BaseStimulusType):
    """Independent Poisson spike trains delivered to each connected target."""
    native_name = "poisson_generator"
    default_parameters = {
        'rate':  0.0,  # Hz
        'start': 0.0,  # ms
        'stop':  1e300,  # ms
    }
    parameter_checks = {
        'rate': (_non_negative, "rate must not be negative"),
        'start': (_non_negative, "start time must not be negative"),
    }


class SpikeRecorder(BaseRecorderType):
    """Counts and stores the spikes of the neurons connected to it."""
    native_name = "spike_recorder"
    default_parameters = {
        'record_to': "memory",
        'label': "",
    }
    parameter_checks = {
        'record_to': (lambda v: v in ("memory", "ascii"),
                      "record_to must be 'memory' or 'ascii'"),
    }


standard_models = dict((cls.native_name, cls)
                       for cls in (IafCondExp, IafPscAlpha, StaticSynapse,
                                   PoissonGenerator, SpikeRecorder))


def get_model_class(native_name, base_class=BaseModelType):
    """
    Return the model class with the given kernel name, checking that it is a
    subclass of `base_class`.
    """
    try:
        cls = standard_models[native_name]
    except KeyError:
        raise errors.ConfigurationError(
            "Unknown model '%s'. Available models are: %s" % (native_name,
                                                              ", ".join(sorted(standard_models))))
    if not issubclass(cls, base_class):
        raise errors.ConfigurationError("'%s' cannot be used as a %s" % (native_name,
                                                                         base_class.__name__))
    return cls
