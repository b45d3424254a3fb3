"""
vabench is a Python package for running the Vogels-Abbott balanced random
network benchmark on a spiking neural network simulation kernel.

To run the benchmark, load a kernel backend and hand it a parameter set, e.g.
    from vabench.utility import load_kernel
    from vabench.parameters import ParameterSet
    from vabench.driver import run_benchmark

    print(run_benchmark(ParameterSet.default(scale=0.1), load_kernel("mock")))

Classes for describing and building the experiment:
    ParameterSet, ExecutionConfig
    Models: IafCondExp, IafPscAlpha, StaticSynapse, PoissonGenerator,
            SpikeRecorder
    Connectors: FixedInDegreeConnector, AllToAllConnector
    Population, PopulationView, Projection
    TopologyBuilder, DeviceWiring
    SimulationDriver, Metrics, ReportGenerator

Available kernel backends:
    mock
    nest

Other modules:
    utility
    random
    errors

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

__version__ = '0.1.0'
__all__ = ["connectors", "core", "devices", "driver", "errors", "kernel",
           "models", "parameters", "populations", "random", "report",
           "topology", "mock", "nest", "utility"]
