from .base import SelectionStrategy
from .factory import SelectionStrategyFactory
from .seedqueue import SeedQueueSelection
from .standard import StandardSelection

__all__ = [
    "SelectionStrategy",
    "SelectionStrategyFactory",
    "SeedQueueSelection",
    "StandardSelection",
]
