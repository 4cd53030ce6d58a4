"""Domain layer for the column mapper.

This layer contains the mapping core: entities and pure services.
It is independent of external frameworks and infrastructure.
"""
