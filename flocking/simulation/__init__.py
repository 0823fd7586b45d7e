"""
Simulation module containing interactive and benchmark simulation classes.
"""

from .interactive import Simulation
from .benchmark import BenchmarkSimulation

__all__ = ['Simulation', 'BenchmarkSimulation']
