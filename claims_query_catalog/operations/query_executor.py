from claims_query_catalog.connector.connector_registry import create_connector
from claims_query_catalog.logger import d_logger
from claims_query_catalog.models.catalog_models import BoundStatement, ResultSet
from claims_query_catalog.models.data_source_models import DataSourceConfiguration


class QueryExecutor:
    """
    Runs bound statements against the configured relational data source.

    A connection is opened for every statement and released when it finishes,
    whether it succeeded or not. Failed statements are not retried.
    """

    def __init__(self, configuration: DataSourceConfiguration) -> None:
        """
        Params:
            configuration (DataSourceConfiguration): Connection settings, created once at process start.
        """
        self.configuration = configuration

    def execute(self, bound_statement: BoundStatement) -> ResultSet:
        """
        Execute a bound statement.

        Params:
            bound_statement (BoundStatement): SQL with markers and its ordered values.

        Returns:
            ResultSet: Rows returned by the data source.

        Raises:
            DataSourceConnectionException: If the data source is unreachable.
            QueryExecutionException: If the data source rejects the statement.
        """
        d_logger.debug(
            f"Executing {bound_statement.template_id} on "
            f"{self.configuration.data_source_type}: {bound_statement.sql}"
        )
        with create_connector(self.configuration) as connector:
            return connector.execute(bound_statement.sql, bound_statement.values)
