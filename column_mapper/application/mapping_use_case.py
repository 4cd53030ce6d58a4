"""Use case: suggest a column mapping for one data file.

Reads the source columns and the target field catalog through ports, runs the
mapping service, logs the outcome, and optionally persists the result.
"""

from __future__ import annotations

from dataclasses import dataclass
import traceback
from typing import TYPE_CHECKING

from ..constants import LogLevels
from .models import MapColumnsResponse

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.mapping import MappingResult
    from .models import MapColumnsRequest
    from .ports.repositories import (
        MappingResultRepositoryPort,
        SourceDataRepositoryPort,
        TargetFieldRepositoryPort,
    )
    from .ports.services import LoggerPort, MappingPort

VERBOSE_TRACEBACK_LEVEL = LogLevels.DEBUG


@dataclass(slots=True)
class MappingDependencies:
    logger: LoggerPort
    source_data_repository: SourceDataRepositoryPort
    target_field_repository: TargetFieldRepositoryPort
    mapping_service: MappingPort
    result_repository: MappingResultRepositoryPort | None = None


class MappingUseCase:
    """Suggest a mapping for one data file against one field catalog."""

    def __init__(self, dependencies: MappingDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._source_data_repository = dependencies.source_data_repository
        self._target_field_repository = dependencies.target_field_repository
        self._mapping_service = dependencies.mapping_service
        self._result_repository = dependencies.result_repository

    def execute(self, request: MapColumnsRequest) -> MapColumnsResponse:
        response = MapColumnsResponse()
        try:
            columns = self._source_data_repository.read_columns(request.data_file)
            fields = self._target_field_repository.load_fields(request.fields_file)
            self.logger.log_mapping_start(
                request.data_file.name, len(columns), len(fields)
            )
            if not fields:
                self.logger.warning(
                    f"No target fields found in {request.fields_file.name}"
                )

            result = self._mapping_service.suggest(columns, fields)
            for assignment in result.assignments.values():
                self.logger.log_assignment(assignment)
            self.logger.log_summary(result.summary)

            response.result = result
            response.selected = self._mapping_service.select(
                result, request.min_confidence
            )
            self.logger.verbose(
                f"{len(response.selected)} mappings above "
                f"{request.min_confidence:.0%} confidence"
            )

            if request.output_file is not None:
                response.output_path = self._save(result, request.output_file)
            response.success = True
        except Exception as exc:
            response.success = False
            response.errors.append(str(exc))
            self.logger.error(f"{request.data_file.name}: {exc}")
            if request.verbose >= VERBOSE_TRACEBACK_LEVEL:
                self.logger.error(traceback.format_exc())
        return response

    def _save(self, result: MappingResult, output_file: Path) -> Path:
        if self._result_repository is None:
            raise RuntimeError("No result repository configured for saving output")
        path = self._result_repository.save(result, output_file)
        self.logger.success(f"Saved mapping to {path}")
        return path
