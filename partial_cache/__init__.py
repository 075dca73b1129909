"""
Partial object caching simulator.

Items are sequences of fixed-size chunks; the NonBinary policy keeps a
prefix of each item and sizes it from a sampled origin delay.
"""
from .policies import AccessEvent, NonBinaryPolicy, PolicyStats
from .simulator import CacheSim

__version__ = "0.1.0"

__all__ = ["AccessEvent", "CacheSim", "NonBinaryPolicy", "PolicyStats"]
