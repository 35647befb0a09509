from pydantic import BaseModel, ConfigDict, Field
from claims_query_catalog.definitions.custom_definitions import (
    DataSourceType,
    SnowflakeAuthenticatorType,
)


class DataSourceConfiguration(BaseModel):
    """
    Connection settings handed to the query executor when it is built.

    Only the fields of the selected data source type are read.
    """

    model_config = ConfigDict(frozen=True)

    data_source_type: DataSourceType = Field(
        default=DataSourceType.SQLITE, description="Which connector to use"
    )
    sqlite_database: str | None = Field(
        default=None, description="Path to an existing SQLite database file"
    )
    account: str | None = Field(default=None, description="Snowflake account identifier")
    user: str | None = Field(default=None, description="Snowflake user")
    password: str | None = Field(default=None, description="Snowflake password")
    role: str | None = Field(default=None, description="Snowflake role")
    warehouse: str | None = Field(default=None, description="Snowflake warehouse")
    database: str | None = Field(default=None, description="Snowflake database")
    table_schema: str | None = Field(default=None, description="Snowflake schema")
    authenticator: SnowflakeAuthenticatorType | None = Field(
        default=None, description="External browser or key pair authentication"
    )
    private_key_file: str | None = Field(
        default=None, description="Path to the private key file for key pair authentication"
    )
    private_key_password: str | None = Field(
        default=None, description="Password for the private key"
    )
