# coding: utf-8
"""
Benchmark 1 of

    Brette et al. (2007) Journal of Computational Neuroscience 23: 349-398

The network is the conductance-based (COBA) network of Vogels & Abbott
(J. Neurosci, 2005): 4000 integrate-and-fire neurons, 80% excitatory and 20%
inhibitory, each receiving input from 2% of each population. The first 500
excitatory neurons are driven by a Poisson source for the first 50 ms.

Usage: python VAbenchmark.py [-h] [--scale SCALE] [--threads THREADS]
                             [--seed SEED] [--simtime SIMTIME]
                             [--logfile LOGFILE] [--debug] kernel

positional arguments:
  kernel             mock or nest

optional arguments:
  -h, --help         show this help message and exit
  --scale SCALE      factor applied to the size of both populations
  --threads THREADS  number of threads per MPI process
  --seed SEED        seed for the kernel's random number generators
  --simtime SIMTIME  simulated duration in ms
  --logfile LOGFILE  write the log to this file rather than to the screen
  --debug            print debugging information

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from vabench.utility import get_kernel, init_logging
from vabench.parameters import ParameterSet
from vabench.driver import run_benchmark
from vabench.random import mpi_rank

kernel, options = get_kernel(("--scale", "factor applied to the size of both populations",
                              {"type": float, "default": 1.0}),
                             ("--threads", "number of threads per MPI process",
                              {"type": int, "default": 1}),
                             ("--seed", "seed for the kernel's random number generators",
                              {"type": int, "default": 98765}),
                             ("--simtime", "simulated duration in ms",
                              {"type": float, "default": 1000.0}),
                             ("--logfile", "write the log to this file rather than to the screen"),
                             ("--debug", "print debugging information", {"action": "store_true"}))

np = kernel.num_processes()
init_logging(options.logfile, debug=options.debug, num_processes=np, rank=mpi_rank)

# === Define parameters ========================================================

parameters = ParameterSet.default(scale=options.scale,
                                  threads=options.threads,
                                  rng_seed=options.seed,
                                  simtime=options.simtime)

# === Build, run and report ====================================================

report = run_benchmark(parameters, kernel)

if mpi_rank == 0:
    print(report)
