from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.mapping_use_case import MappingDependencies, MappingUseCase
from ..config import MapperConfig
from ..domain.services.mapping.engine import MappingEngine
from ..domain.services.mapping.scorer import MatchScorer
from .io.csv_reader import CSVReader
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.mapping_result_repository import MappingResultRepository
from .repositories.source_data_repository import SourceDataRepository
from .repositories.target_field_repository import TargetFieldRepository
from .services.mapping_service_adapter import MappingServiceAdapter

if TYPE_CHECKING:
    from ..application.ports.repositories import (
        MappingResultRepositoryPort,
        SourceDataRepositoryPort,
        TargetFieldRepositoryPort,
    )
    from ..application.ports.services import LoggerPort, MappingPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: MapperConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or MapperConfig()
        self._logger_instance: LoggerPort | None = None
        self._csv_reader_instance: CSVReader | None = None
        self._source_data_repository_instance: SourceDataRepositoryPort | None = None
        self._target_field_repository_instance: TargetFieldRepositoryPort | None = None
        self._result_repository_instance: MappingResultRepositoryPort | None = None
        self._mapping_engine_instance: MappingEngine | None = None
        self._mapping_service_instance: MappingPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console,
                    verbosity=self.verbose,
                    high_threshold=self.config.high_confidence,
                )
        return self._logger_instance

    def create_csv_reader(self) -> CSVReader:
        if self._csv_reader_instance is None:
            self._csv_reader_instance = CSVReader()
        return self._csv_reader_instance

    def create_source_data_repository(self) -> SourceDataRepositoryPort:
        if self._source_data_repository_instance is None:
            self._source_data_repository_instance = SourceDataRepository(
                csv_reader=self.create_csv_reader(),
                sample_size=self.config.sample_size,
            )
        return self._source_data_repository_instance

    def create_target_field_repository(self) -> TargetFieldRepositoryPort:
        if self._target_field_repository_instance is None:
            self._target_field_repository_instance = TargetFieldRepository()
        return self._target_field_repository_instance

    def create_result_repository(self) -> MappingResultRepositoryPort:
        if self._result_repository_instance is None:
            self._result_repository_instance = MappingResultRepository()
        return self._result_repository_instance

    def create_mapping_engine(self) -> MappingEngine:
        if self._mapping_engine_instance is None:
            self._mapping_engine_instance = MappingEngine(
                scorer=MatchScorer(self.config.to_scoring_weights()),
                policy=self.config.to_assignment_policy(),
                high_threshold=self.config.high_confidence,
                medium_threshold=self.config.medium_confidence,
            )
        return self._mapping_engine_instance

    def create_mapping_service(self) -> MappingPort:
        if self._mapping_service_instance is None:
            self._mapping_service_instance = MappingServiceAdapter(
                engine=self.create_mapping_engine()
            )
        return self._mapping_service_instance

    def create_mapping_use_case(self) -> MappingUseCase:
        dependencies = MappingDependencies(
            logger=self.create_logger(),
            source_data_repository=self.create_source_data_repository(),
            target_field_repository=self.create_target_field_repository(),
            mapping_service=self.create_mapping_service(),
            result_repository=self.create_result_repository(),
        )
        return MappingUseCase(dependencies)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._csv_reader_instance = None
        self._source_data_repository_instance = None
        self._target_field_repository_instance = None
        self._result_repository_instance = None
        self._mapping_engine_instance = None
        self._mapping_service_instance = None


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose)
