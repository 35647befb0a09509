from claims_query_catalog.connector.base_connector import BaseConnector
from claims_query_catalog.connector.snowpark_connector import SnowparkConnector
from claims_query_catalog.connector.sqlite_connector import SqliteConnector
from claims_query_catalog.definitions.custom_definitions import DataSourceType
from claims_query_catalog.models.data_source_models import DataSourceConfiguration

CONNECTORS: dict[DataSourceType, type[BaseConnector]] = {
    DataSourceType.SQLITE: SqliteConnector,
    DataSourceType.SNOWFLAKE: SnowparkConnector,
}


def create_connector(configuration: DataSourceConfiguration) -> BaseConnector:
    """
    Create the connector registered for the configured data source type.

    Params:
        configuration (DataSourceConfiguration): Connection settings.

    Returns:
        BaseConnector: An unopened connector; use it as a context manager.
    """
    return CONNECTORS[configuration.data_source_type](configuration)
