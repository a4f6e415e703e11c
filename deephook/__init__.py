"""
DeepHook - shared utilities for the DeepHook fishing simulation.

The simulation itself lives in games.DeepHook; data models in models.
"""

__version__ = "0.1.0"
