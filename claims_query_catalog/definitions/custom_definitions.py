from enum import Enum


class ApplicationEnvironment(str, Enum):
    """Enum for application environment."""

    DEV = "DEV"
    TEST = "TEST"
    PROD = "PROD"

    def __str__(self) -> str:
        return self.value


class DataSourceType(str, Enum):
    """Enum for the relational data sources a template can run against."""

    SQLITE = "SQLITE"
    SNOWFLAKE = "SNOWFLAKE"

    def __str__(self) -> str:
        return self.value


class ParameterType(str, Enum):
    """Enum for the semantic type of a template parameter."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"

    def __str__(self) -> str:
        return self.value


class ExecutionStatus(Enum):
    """Enum for execution status."""

    STARTING = "STARTING"
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"

    def __str__(self) -> str:
        return self.value


class OutputFormat(str, Enum):
    """Enum for result export formats, keyed by file extension."""

    CSV = ".csv"
    XLSX = ".xlsx"


class SnowflakeAuthenticatorType(str, Enum):
    """Enum for Snowflake authenticator type."""

    EXTERNALBROWSER = "EXTERNALBROWSER"
    SNOWFLAKE_JWT = "SNOWFLAKE_JWT"
