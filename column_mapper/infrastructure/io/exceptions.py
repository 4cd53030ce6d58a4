class ColumnMapperInfrastructureError(Exception):
    pass


class DataSourceError(ColumnMapperInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class MappingResultSaveError(ColumnMapperInfrastructureError):
    pass
