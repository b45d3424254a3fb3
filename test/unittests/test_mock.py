"""
Tests of the reference kernel.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import unittest

import numpy
from numpy.testing import assert_array_equal
import neo

from vabench import errors, models
from vabench.connectors import AllToAllConnector, FixedInDegreeConnector
from vabench.kernel import ExecutionConfig, Kernel
from vabench.mock import MockKernel, NodeCollection
from mocks import configured_kernel


class NodeCollectionTest(unittest.TestCase):

    def test_slice(self):
        nc = NodeCollection([3, 4, 5, 6])
        self.assertEqual(nc[:2], NodeCollection([3, 4]))
        self.assertEqual(nc[1], 4)
        self.assertEqual(list(nc), [3, 4, 5, 6])

    def test_immutable(self):
        nc = NodeCollection([3, 4])
        self.assertRaises(ValueError, nc.ids.__setitem__, 0, 7)

    def test_repr(self):
        self.assertEqual(repr(NodeCollection([3, 4, 5])), "NodeCollection(first=3, last=5)")
        self.assertEqual(repr(NodeCollection([])), "NodeCollection()")


class SetUpTest(unittest.TestCase):

    def test_is_a_kernel(self):
        self.assertIsInstance(MockKernel(), Kernel)

    def test_configure_twice(self):
        kernel = configured_kernel()
        self.assertRaises(errors.KernelError, kernel.configure, ExecutionConfig())

    def test_create_before_configure(self):
        self.assertRaises(errors.KernelError, MockKernel().create, models.IafCondExp(), 3)

    def test_invalid_rank(self):
        self.assertRaises(ValueError, MockKernel, num_processes=2, rank=2)

    def test_create(self):
        kernel = configured_kernel()
        nc1 = kernel.create(models.IafCondExp(), 3)
        nc2 = kernel.create(models.PoissonGenerator(), 1)
        self.assertEqual(list(nc1), [1, 2, 3])
        self.assertEqual(list(nc2), [4])
        self.assertIs(kernel.model_of(4), models.PoissonGenerator)

    def test_create_negative(self):
        kernel = configured_kernel()
        self.assertRaises(errors.KernelError, kernel.create, models.IafCondExp(), -1)

    def test_create_synapse_model(self):
        kernel = configured_kernel()
        self.assertRaises(errors.InvalidModelError, kernel.create, models.StaticSynapse(), 1)

    def test_set_defaults(self):
        kernel = configured_kernel()
        kernel.set_defaults(models.IafCondExp(V_th=-55.0))
        nc = kernel.create(models.IafCondExp(), 2)
        self.assertEqual(kernel.get_status(nc[1])["V_th"], -55.0)

    def test_set_status(self):
        kernel = configured_kernel()
        nc = kernel.create(models.PoissonGenerator(), 1)
        kernel.set_status(nc, models.PoissonGenerator(rate=50.0))
        self.assertEqual(kernel.get_status(nc[0])["rate"], 50.0)

    def test_set_status_wrong_model(self):
        kernel = configured_kernel()
        nc = kernel.create(models.PoissonGenerator(), 1)
        self.assertRaises(errors.KernelError, kernel.set_status, nc, models.SpikeRecorder())

    def test_copy_model(self):
        kernel = configured_kernel()
        kernel.copy_model(models.StaticSynapse(weight=4.0, delay=0.2), "excitatory")
        self.assertEqual(kernel.synapse_models["excitatory"], {"weight": 4.0, "delay": 0.2})
        self.assertRaises(errors.KernelError, kernel.copy_model,
                          models.StaticSynapse(), "excitatory")

    def test_copy_model_delay_below_resolution(self):
        kernel = configured_kernel(resolution=0.5)
        self.assertRaises(errors.KernelError, kernel.copy_model,
                          models.StaticSynapse(delay=0.2), "excitatory")


class ConnectTest(unittest.TestCase):

    def setUp(self):
        self.kernel = configured_kernel()
        self.p1 = self.kernel.create(models.IafCondExp(), 10)
        self.p2 = self.kernel.create(models.IafCondExp(), 5)

    def test_connect_fixed_indegree(self):
        n = self.kernel.connect(self.p1, self.p2, FixedInDegreeConnector(3))
        self.assertEqual(n, 15)
        sources, targets = self.kernel.get_connections()
        self.assertTrue(numpy.isin(sources, self.p1.ids).all())
        assert_array_equal(numpy.unique(targets), self.p2.ids)

    def test_connect_unknown_synapse_model(self):
        self.assertRaises(errors.InvalidModelError, self.kernel.connect,
                          self.p1, self.p2, AllToAllConnector(), "excitatory")

    def test_connect_impossible_rule(self):
        self.assertRaises(errors.KernelError, self.kernel.connect,
                          self.p2, self.p1, FixedInDegreeConnector(6))

    def test_recurrent_without_self_connections(self):
        self.kernel.connect(self.p1, self.p1, FixedInDegreeConnector(9, allow_self_connections=False))
        sources, targets = self.kernel.get_connections()
        self.assertFalse((sources == targets).any())

    def test_connect_after_simulate(self):
        self.kernel.simulate(10.0)
        self.assertRaises(errors.KernelError, self.kernel.connect,
                          self.p1, self.p2, AllToAllConnector())

    def test_same_seed_same_connectivity(self):
        other = configured_kernel()
        q1 = other.create(models.IafCondExp(), 10)
        q2 = other.create(models.IafCondExp(), 5)
        self.kernel.connect(self.p1, self.p2, FixedInDegreeConnector(4))
        other.connect(q1, q2, FixedInDegreeConnector(4))
        assert_array_equal(self.kernel.get_connections()[0], other.get_connections()[0])


class SimulateTest(unittest.TestCase):

    def setUp(self):
        self.kernel = configured_kernel(firing_rate=20.0)
        self.cells = self.kernel.create(models.IafCondExp(), 100)
        self.recorder = self.kernel.create(models.SpikeRecorder(), 1)
        self.kernel.connect(self.cells[:50], self.recorder, AllToAllConnector())

    def test_negative_time(self):
        self.assertRaises(errors.KernelError, self.kernel.simulate, -1.0)

    def test_n_events(self):
        self.assertEqual(self.kernel.get_recorder_state(self.recorder).n_events, 0)
        self.kernel.simulate(1000.0)
        n_events = self.kernel.get_recorder_state(self.recorder).n_events
        # 50 neurons at 20 Hz for 1 s: mean 1000, standard deviation about 32
        self.assertTrue(800 < n_events < 1200, n_events)

    def test_events_accumulate(self):
        self.kernel.simulate(100.0)
        n1 = self.kernel.get_recorder_state(self.recorder).n_events
        self.kernel.simulate(100.0)
        self.assertGreaterEqual(self.kernel.get_recorder_state(self.recorder).n_events, n1)
        self.assertEqual(self.kernel.t, 200.0)

    def test_recorder_state_of_a_neuron(self):
        self.assertRaises(errors.KernelError, self.kernel.get_recorder_state, self.cells[:1])

    def test_only_local_neurons_are_recorded(self):
        kernel = MockKernel(num_processes=2, rank=1, firing_rate=20.0)
        kernel.configure(ExecutionConfig(rng_seed=1))
        cells = kernel.create(models.IafCondExp(), 10)
        recorder = kernel.create(models.SpikeRecorder(), 1)
        kernel.connect(cells, recorder, AllToAllConnector())
        kernel.simulate(1000.0)
        segment = kernel.get_data(recorder)
        self.assertEqual([st.annotations["source_id"] for st in segment.spiketrains],
                         [1, 3, 5, 7, 9])
        self.assertEqual(kernel.num_processes(), 2)

    def test_get_data(self):
        self.kernel.simulate(200.0)
        segment = self.kernel.get_data(self.recorder)
        self.assertIsInstance(segment, neo.Segment)
        self.assertEqual(len(segment.spiketrains), 50)
        n_spikes = sum(st.size for st in segment.spiketrains)
        self.assertEqual(n_spikes, self.kernel.get_recorder_state(self.recorder).n_events)
        for st in segment.spiketrains:
            self.assertEqual(float(st.t_stop.rescale("ms")), 200.0)
            self.assertTrue((numpy.diff(st.magnitude) >= 0).all())


if __name__ == '__main__':
    unittest.main()
