"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .repositories import (
    MappingResultRepositoryPort,
    SourceDataRepositoryPort,
    TargetFieldRepositoryPort,
)
from .services import LoggerPort, MappingPort

__all__ = [
    "LoggerPort",
    "MappingPort",
    "MappingResultRepositoryPort",
    "SourceDataRepositoryPort",
    "TargetFieldRepositoryPort",
]
