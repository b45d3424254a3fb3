"""
Mock implementation of the kernel interface, for testing and dry runs.

This kernel creates nodes and connections like a real one, but generates
random spike data rather than really running simulations.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from .simulator import MockKernel, NodeCollection, ConnectionBlock  # noqa: F401

kernel_class = MockKernel
