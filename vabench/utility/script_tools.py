"""
A collection of functions to help writing benchmark scripts.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import os
from importlib import import_module
import logging


def load_kernel(name, **kernel_args):
    """
    Import the kernel backend module ``vabench.<name>`` and return an
    instance of its kernel class, created with `kernel_args`.
    """
    try:
        backend = import_module("vabench.%s" % name)
    except ImportError as err:
        raise ImportError("Cannot load the '%s' kernel backend: %s" % (name, err)) from err
    return backend.kernel_class(**kernel_args)


def get_kernel(*arguments, argv=None):
    """
    Return a kernel instance and the command-line arguments, based on
    command-line arguments.

    The kernel backend name ("mock" or "nest") should be the first positional
    argument. If your script needs additional arguments, you can specify them
    as (name, help_text) tuples, optionally followed by a dict of extra
    arguments for :meth:`argparse.ArgumentParser.add_argument`.

    Returns (kernel, command-line arguments)
    """
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("kernel",
                        help="mock or nest")
    for argument in arguments:
        arg_name, help_text = argument[:2]
        extra_args = {}
        if len(argument) > 2:
            extra_args = argument[2]
        parser.add_argument(arg_name, help=help_text, **extra_args)
    args = parser.parse_args(argv)
    kernel = load_kernel(args.kernel)
    return kernel, args


def init_logging(logfile, debug=False, num_processes=1, rank=0, level=None):
    """
    Simple configuration of logging.
    """
    # allow logfile == None
    # which implies output to stderr
    if logfile:
        if num_processes > 1:
            logfile += '.%d' % rank
        logfile = os.path.abspath(logfile)

    # prefix log messages with mpi rank
    mpi_prefix = ""
    if num_processes > 1:
        mpi_prefix = 'Rank %d of %d: ' % (rank, num_processes)

    if debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    # allow user to override exact log_level
    if level:
        log_level = level

    logging.basicConfig(
        level=log_level,
        format=mpi_prefix + '%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        filename=logfile,
        filemode='w')
    return logging.getLogger("vabench")

