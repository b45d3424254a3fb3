# encoding: utf-8
"""
Defines exceptions for the vabench API

    ConfigurationError
    KernelError
    PhaseError
    NonExistentParameterError
    InvalidModelError

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""


class ConfigurationError(ValueError):
    """Missing or invalid parameters, population sizes, degrees or subset counts."""
    pass


class KernelError(Exception):
    """Failure reported by the simulation kernel."""
    pass


class PhaseError(Exception):
    """A lifecycle phase was entered out of order or more than once."""
    pass


class InvalidModelError(KernelError):
    """Attempt to use a model the kernel does not know about."""
    pass


class NonExistentParameterError(KeyError):
    """
    Model parameter does not exist.
    """

    def __init__(self, parameter_name, model_name, valid_parameter_names=['unknown']):
        Exception.__init__(self)
        self.parameter_name = parameter_name
        self.model_name = model_name
        self.valid_parameter_names = sorted(valid_parameter_names)

    def __str__(self):
        return "%s (valid parameters for %s are: %s)" % (self.parameter_name,
                                                         self.model_name,
                                                         ", ".join(self.valid_parameter_names))
