import sqlite3
from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from types import TracebackType
from typing import Any
from claims_query_catalog.connector.base_connector import BaseConnector
from claims_query_catalog.custom_exceptions.data_source_exceptions import (
    DataSourceConnectionException,
    QueryExecutionException,
)
from claims_query_catalog.logger import d_logger, logger
from claims_query_catalog.models.catalog_models import ResultSet
from claims_query_catalog.models.data_source_models import DataSourceConfiguration

IN_MEMORY_DATABASE = ":memory:"


def _adapt_value(value: Any) -> Any:
    """Convert values sqlite3 has no native adapter for."""
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


class SqliteConnector(BaseConnector):
    """
    Connector for a local SQLite database file.
    """

    def __init__(self, configuration: DataSourceConfiguration) -> None:
        super().__init__(configuration)
        self.connection: sqlite3.Connection | None = None

    def __enter__(self) -> "SqliteConnector":
        """
        Open the configured database read-write.

        A missing file is reported as unreachable instead of being created empty.

        Returns:
            SqliteConnector: The current instance.

        Raises:
            DataSourceConnectionException: If no database is configured or it cannot be opened.
        """
        database = self.configuration.sqlite_database
        if database is None:
            raise DataSourceConnectionException("No SQLite database is configured.")

        try:
            if database == IN_MEMORY_DATABASE:
                self.connection = sqlite3.connect(database)
            else:
                uri = f"{Path(database).resolve().as_uri()}?mode=rw"
                self.connection = sqlite3.connect(uri, uri=True)
        except sqlite3.Error as e:
            logger.error(f"Could not open SQLite database {database}: {e}")
            raise DataSourceConnectionException(
                f"Could not open SQLite database {database}: {e}"
            )
        d_logger.debug(f"Opened SQLite database {database}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self.connection is not None:
            self.connection.close()
            self.connection = None

    def execute(self, sql: str, values: Sequence[Any]) -> ResultSet:
        """
        Execute a statement and fetch every row.

        Params:
            sql (str): SQL with ``?`` markers.
            values (Sequence[Any]): Values for the markers, in order.

        Returns:
            ResultSet: Columns and rows of the statement.

        Raises:
            DataSourceConnectionException: If the connection is not open.
            QueryExecutionException: If SQLite rejects the statement.
        """
        if self.connection is None:
            raise DataSourceConnectionException(
                "Connection is not open. Please use the context manager."
            )

        parameters = tuple(_adapt_value(value) for value in values)
        cursor: sqlite3.Cursor | None = None
        try:
            cursor = self.connection.execute(sql, parameters)
            columns = tuple(column[0] for column in cursor.description or ())
            rows = [dict(zip(columns, record)) for record in cursor.fetchall()]
        except (sqlite3.Error, OverflowError, UnicodeEncodeError) as e:
            # out of range integers and lone surrogates fail binding outside sqlite3.Error
            logger.error(f"Error executing query: {e}")
            raise QueryExecutionException(
                f"SQLite rejected the statement: {e}", engine_message=str(e)
            )
        finally:
            if cursor is not None:
                cursor.close()

        return ResultSet(columns=columns, rows=rows)
