"""Service adapters implementing application ports."""

from .mapping_service_adapter import MappingServiceAdapter

__all__ = ["MappingServiceAdapter"]
