from abc import ABC, abstractmethod
from collections.abc import Sequence
from types import TracebackType
from typing import Any
from claims_query_catalog.models.catalog_models import ResultSet
from claims_query_catalog.models.data_source_models import DataSourceConfiguration


class BaseConnector(ABC):
    """
    Base class for relational data source connectors.

    Connectors are context managers: the connection is opened in ``__enter__``
    and released in ``__exit__``, whatever happened in between.
    """

    def __init__(self, configuration: DataSourceConfiguration) -> None:
        """
        Initialize the connector with explicit connection settings.

        :param configuration: Connection settings for the data source.
        """
        self.configuration: DataSourceConfiguration = configuration

    @abstractmethod
    def __enter__(self) -> "BaseConnector":
        """
        Open the connection.

        :return: The connector itself.
        :raises DataSourceConnectionException: If the data source is unreachable.
        """
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """
        Release the connection.
        """
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def execute(self, sql: str, values: Sequence[Any]) -> ResultSet:
        """
        Execute a statement with positional ``?`` markers.

        :param sql: The SQL statement; values are never part of it.
        :param values: Values for the markers, in order.
        :return: The rows produced by the statement.
        :raises QueryExecutionException: If the data source rejects the statement.
        """
        raise NotImplementedError("Subclasses must implement this method.")
