from __future__ import annotations

from dataclasses import asdict
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..io.exceptions import MappingResultSaveError

if TYPE_CHECKING:
    from ...domain.entities.mapping import Assignment, MappingResult


def _assignment_payload(assignment: Assignment) -> dict[str, Any]:
    return {
        "sourceColumn": assignment.source_column,
        "targetField": assignment.target_name,
        "confidence": round(assignment.confidence, 4),
        "matchKind": assignment.match_kind.value,
        "rationale": assignment.rationale,
        "status": assignment.status.value,
        "phase": assignment.phase.value if assignment.phase else None,
        "conflict": assignment.conflict,
        "alternatives": [
            {
                "targetField": candidate.target_name,
                "confidence": round(candidate.confidence, 4),
                "matchKind": candidate.match_kind.value,
                "rationale": candidate.rationale,
            }
            for candidate in assignment.alternatives
        ],
    }


def mapping_result_payload(result: MappingResult) -> dict[str, Any]:
    summary = asdict(result.summary)
    summary["coverage"] = round(result.summary.coverage, 4)
    return {
        "summary": summary,
        "mappings": {
            name: assignment.target_name
            for name, assignment in result.assignments.items()
            if assignment.is_mapped
        },
        "assignments": [_assignment_payload(a) for a in result.assignments.values()],
    }


def save_mapping_result(result: MappingResult, path: str | Path) -> Path:
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        payload = mapping_result_payload(result)
        with file_path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
    except (OSError, TypeError, ValueError) as exc:
        raise MappingResultSaveError(f"Failed to save mapping result: {exc}") from exc
    return file_path


class MappingResultRepository:
    pass

    def save(self, result: MappingResult, file_path: str | Path) -> Path:
        return save_mapping_result(result, file_path)
