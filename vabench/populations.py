"""
Population and PopulationView classes.

A :class:`Population` is a homogeneous, ordered group of neurons created
together in the kernel. Its membership is fixed at creation.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging

from . import errors

logger = logging.getLogger("vabench")


class BasePopulation(object):

    def __len__(self):
        return self.size

    def first(self, n):
        """
        Return a view onto the first `n` neurons of the population, in
        creation order.
        """
        if n < 0 or n > self.size:
            raise errors.ConfigurationError(
                "Cannot select %d neurons from %s, which has %d" % (n, self.label, self.size))
        return PopulationView(self, n)

    def __repr__(self):
        return "%s(%s, size=%d, model=%s)" % (self.__class__.__name__, self.label,
                                              self.size, self.celltype.native_name)


class Population(BasePopulation):
    """
    A group of neurons, all of the same model.

    Arguments:
        `kernel`:
            the :class:`~vabench.kernel.Kernel` the neurons live in.
        `size`:
            number of neurons.
        `celltype`:
            a cell model instance (e.g. :class:`~vabench.models.IafCondExp`).
            The neurons take the kernel defaults for the model, which the
            driver sets from this record before the population is created.
        `label`:
            a name for the population.
    """
    _nPop = 0

    def __init__(self, kernel, size, celltype, label=None):
        if size < 0:
            raise errors.ConfigurationError("Population size must not be negative (got %d)" % size)
        self.kernel = kernel
        self.size = int(size)
        self.celltype = celltype
        self.label = label or 'population%d' % Population._nPop
        self.node_collection = kernel.create(celltype, self.size)
        Population._nPop += 1
        logger.debug("Created %s", self)


class PopulationView(BasePopulation):
    """
    A view onto the first `size` neurons of a parent population.
    """

    def __init__(self, parent, size):
        self.parent = parent
        self.size = int(size)
        self.kernel = parent.kernel
        self.celltype = parent.celltype
        self.label = "view of the first %d neurons of %s" % (self.size, parent.label)
        self.node_collection = parent.node_collection[:self.size]
