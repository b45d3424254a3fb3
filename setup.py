#!/usr/bin/env python

from setuptools import setup


setup(
    name="vabench",
    version="0.1.0",
    packages=['vabench', 'vabench.mock', 'vabench.nest', 'vabench.utility'],
    author="The PyNN team",
    author_email="andrew.davison@unic.cnrs-gif.fr",
    description="The Vogels-Abbott balanced network benchmark for spiking network simulation kernels",
    long_description=open("README.rst").read(),
    license="CeCILL http://www.cecill.info",
    keywords="computational neuroscience simulation benchmark nest spiking network",
    url="http://neuralensemble.org/",
    classifiers=['Development Status :: 4 - Beta',
                 'Environment :: Console',
                 'Intended Audience :: Science/Research',
                 'License :: Other/Proprietary License',
                 'Natural Language :: English',
                 'Operating System :: OS Independent',
                 'Programming Language :: Python :: 3',
                 'Topic :: Scientific/Engineering'],
    install_requires=['numpy>=1.18.5', 'neo>=0.10.0', 'quantities>=0.12.1'],
    extras_require={
        'MPI': ['mpi4py'],
        'nest': ['nest-simulator'],
        'test': ['pytest'],
    },
)
