from .base import AccessEvent, BasePolicy
from .metrics import PolicyStats
from .non_binary import NonBinaryPolicy

__all__ = ["AccessEvent", "BasePolicy", "NonBinaryPolicy", "PolicyStats"]
