from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.mapping import Assignment, MappingResult


def _empty_str_list() -> list[str]:
    return []


def _empty_selection() -> dict[str, Assignment]:
    return {}


@dataclass(slots=True)
class MapColumnsRequest:
    data_file: Path
    fields_file: Path
    output_file: Path | None = None
    min_confidence: float = Defaults.MIN_CONFIDENCE
    verbose: int = 0


@dataclass(slots=True)
class MapColumnsResponse:
    success: bool = False
    result: MappingResult | None = None
    selected: dict[str, Assignment] = field(default_factory=_empty_selection)
    output_path: Path | None = None
    errors: list[str] = field(default_factory=_empty_str_list)

    @property
    def error(self) -> str | None:
        return self.errors[0] if self.errors else None
