"""Interfaces of the core.

Adapters implement these Protocols; the core services only depend on them.
"""

from core.interfaces.train_source import TrainSource

__all__ = ["TrainSource"]
