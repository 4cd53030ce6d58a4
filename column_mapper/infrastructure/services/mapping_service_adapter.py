"""Infrastructure adapter for the mapping port.

The mapping engine is a pure domain service. This adapter exists so the
application layer depends on a port, not on the concrete engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import MappingPort
from ...domain.services.mapping.engine import MappingEngine

if TYPE_CHECKING:
    from ...domain.entities.columns import SourceColumn, TargetField
    from ...domain.entities.mapping import Assignment, MappingResult


class MappingServiceAdapter(MappingPort):
    def __init__(self, *, engine: MappingEngine | None = None) -> None:
        super().__init__()
        self._engine = engine or MappingEngine()

    @property
    def engine(self) -> MappingEngine:
        return self._engine

    @override
    def suggest(
        self, columns: list[SourceColumn], fields: list[TargetField]
    ) -> MappingResult:
        return self._engine.suggest(columns, fields)

    @override
    def select(
        self, result: MappingResult, min_confidence: float
    ) -> dict[str, Assignment]:
        return self._engine.select_mappings(result.assignments, min_confidence)
