# encoding: utf-8
"""
A collection of utility functions and classes.

Functions:
    get_kernel()      - select a kernel backend from the command line.
    init_logging()    - convenience function for setting up logging to file and
                        to the screen.

    Timer    - a convenience wrapper around the time.perf_counter() function from the
               standard library.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.

"""

from .script_tools import (                                   # noqa: F401
    get_kernel,
    load_kernel,
    init_logging,
)
from .timer import Timer                                      # noqa: F401
