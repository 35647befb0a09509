from collections.abc import Sequence
from types import TracebackType
from typing import Any
from snowflake.snowpark import Session
from snowflake.snowpark.exceptions import SnowparkClientException
from claims_query_catalog.connector.base_connector import BaseConnector
from claims_query_catalog.custom_exceptions.data_source_exceptions import (
    DataSourceConnectionException,
    DataSourceCredentialException,
    QueryExecutionException,
)
from claims_query_catalog.definitions.custom_definitions import SnowflakeAuthenticatorType
from claims_query_catalog.logger import d_logger, logger
from claims_query_catalog.models.catalog_models import ResultSet
from claims_query_catalog.models.data_source_models import DataSourceConfiguration
from claims_query_catalog.operations.obfuscation_operations import load_private_key


def _normalize_column(name: str) -> str:
    """
    Map a Snowflake column name to the key used in result rows.

    Quoted identifiers lose their quotes; unquoted identifiers come back upper
    case and are folded to lower case, matching the alias as written.
    """
    if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
        return name[1:-1].replace('""', '"')
    if name.isupper():
        return name.lower()
    return name


class SnowparkConnector(BaseConnector):
    """
    Connector that runs statements through a Snowpark session.
    """

    def __init__(self, configuration: DataSourceConfiguration) -> None:
        """
        Initialize the SnowparkConnector with connection settings.

        Params:
            configuration (DataSourceConfiguration): Account, user and authentication settings.
        """
        super().__init__(configuration)
        self.session: Session | None = None

    def __enter__(self) -> "SnowparkConnector":
        """
        Create the Snowpark session.

        Returns:
            SnowparkConnector: The current instance of SnowparkConnector.

        Raises:
            DataSourceCredentialException: If the credentials are incomplete.
            DataSourceConnectionException: If the session cannot be created.
        """
        options = self._get_connection_options()
        try:
            self.session = Session.builder.configs(options).create()
        except Exception as e:
            logger.error(f"Could not create Snowpark session: {e}")
            raise DataSourceConnectionException(
                f"Could not connect to Snowflake account {self.configuration.account}: {e}"
            )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """
        Close the session on every exit path.
        """
        if self.session is not None:
            self.session.close()
            self.session = None

    def _get_connection_options(self) -> dict[str, int | str | bytes]:
        """
        Get the connection options for Snowflake.

        Returns:
            dict: A dictionary containing the connection options.

        Raises:
            DataSourceCredentialException: If required credentials are missing.
        """
        configuration = self.configuration
        if configuration.account is None or configuration.user is None:
            raise DataSourceCredentialException(
                "Snowflake account and user must be configured."
            )
        if configuration.password is None and configuration.authenticator is None:
            raise DataSourceCredentialException(
                "Either password or authenticator must be provided in Snowflake credentials."
            )

        options: dict[str, int | str | bytes] = {
            "account": configuration.account,
            "user": configuration.user,
        }
        optional_options = {
            "role": configuration.role,
            "warehouse": configuration.warehouse,
            "database": configuration.database,
            "schema": configuration.table_schema,
            "password": configuration.password,
        }
        options.update(
            {key: value for key, value in optional_options.items() if value is not None}
        )

        if configuration.authenticator == SnowflakeAuthenticatorType.EXTERNALBROWSER:
            options["authenticator"] = configuration.authenticator.value
        elif configuration.authenticator == SnowflakeAuthenticatorType.SNOWFLAKE_JWT:
            if configuration.private_key_file is None:
                raise DataSourceCredentialException(
                    "Private key file must be provided for JWT authentication."
                )
            if configuration.private_key_password is None:
                raise DataSourceCredentialException(
                    "Private key password must be provided for JWT authentication."
                )
            options["authenticator"] = configuration.authenticator.value
            options["private_key"] = load_private_key(
                private_key_file=configuration.private_key_file,
                private_key_password=configuration.private_key_password,
            )

        return options

    def execute(self, sql: str, values: Sequence[Any]) -> ResultSet:
        """
        Execute a statement with qmark bind variables and collect the rows.

        Params:
            sql (str): SQL with ``?`` markers.
            values (Sequence[Any]): Values for the markers, in order.

        Returns:
            ResultSet: Columns and rows of the statement.

        Raises:
            DataSourceConnectionException: If the session is not initialized.
            QueryExecutionException: If Snowflake rejects the statement or the rows cannot be fetched.
        """
        if self.session is None:
            raise DataSourceConnectionException(
                "Session is not initialized. Please use the context manager."
            )

        try:
            dataframe = self.session.sql(sql, params=list(values) or None)
            collected = dataframe.collect()
            columns = tuple(_normalize_column(name) for name in dataframe.columns)
        except SnowparkClientException as e:
            logger.error(f"Error executing query: {e}")
            raise QueryExecutionException(
                f"Snowflake rejected the statement: {e}", engine_message=str(e)
            )

        # Row is a tuple in column order
        rows = [dict(zip(columns, row)) for row in collected]
        d_logger.debug(f"Snowflake returned {len(rows)} rows")
        return ResultSet(columns=columns, rows=rows)
