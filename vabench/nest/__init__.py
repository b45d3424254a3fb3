# -*- coding: utf-8 -*-
"""
NEST implementation of the kernel interface.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from .simulator import NESTKernel  # noqa: F401

kernel_class = NESTKernel
