class DataSourceException(Exception):
    """Base exception for all data source errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataSourceConnectionException(DataSourceException):
    """Exception raised when the data source is unreachable."""

    def __init__(self, message: str):
        super().__init__(message)


class QueryExecutionException(DataSourceException):
    """Exception raised when the data source rejects a statement."""

    def __init__(self, message: str, engine_message: str | None = None):
        super().__init__(message)
        self.engine_message = engine_message


class DataSourceCredentialException(DataSourceException):
    """Exception raised when data source credentials are incomplete."""

    def __init__(self, message: str):
        super().__init__(message)


class DataSourcePrivateKeyException(DataSourceException):
    """Exception raised when there are issues with private key authentication."""

    def __init__(self, message: str):
        super().__init__(message)
