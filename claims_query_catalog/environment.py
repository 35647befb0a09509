from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from claims_query_catalog.definitions.custom_definitions import (
    ApplicationEnvironment,
    DataSourceType,
    SnowflakeAuthenticatorType,
)
from claims_query_catalog.models.data_source_models import DataSourceConfiguration
from claims_query_catalog.operations.obfuscation_operations import decode_string


class EnvironmentConfiguration(BaseSettings):
    """
    Configuration class for environment variables.

    Every variable is prefixed with CLAIMS_CATALOG_, e.g. CLAIMS_CATALOG_DATA_SOURCE_TYPE.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLAIMS_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: ApplicationEnvironment = Field(
        default=ApplicationEnvironment.DEV,
        description="The environment the catalog is running in",
    )
    data_source_type: DataSourceType = Field(
        default=DataSourceType.SQLITE, description="Which data source templates run against"
    )
    sqlite_database: str | None = Field(
        default=None, description="Path to the SQLite database file"
    )
    template_file: str | None = Field(
        default=None, description="Template catalog YAML; the packaged catalog when unset"
    )
    snowflake_account: str | None = Field(
        default=None, description="The Snowflake account identifier, e.g. xy12345.us-east-1"
    )
    snowflake_user: str | None = Field(default=None, description="Snowflake user")
    snowflake_password: str | None = Field(
        default=None, description="Base64 encoded; if not provided, an authenticator is required"
    )
    snowflake_role: str | None = Field(default=None, description="Snowflake role")
    snowflake_warehouse: str | None = Field(default=None, description="Snowflake warehouse")
    snowflake_database: str | None = Field(default=None, description="Snowflake database")
    snowflake_schema: str | None = Field(default=None, description="Snowflake schema")
    snowflake_authenticator: SnowflakeAuthenticatorType | None = Field(
        default=None, description="External authenticator, externalbrowser or snowflake_jwt"
    )
    snowflake_private_key_file: str | None = Field(
        default=None, description="Path to the private key file for key pair authentication"
    )
    snowflake_private_key_password: str | None = Field(
        default=None, description="Base64 encoded password for the private key"
    )

    # Environment variables cannot be unset from a .env file, so an empty
    # string stands in for None.

    @field_validator(
        "sqlite_database",
        "template_file",
        "snowflake_account",
        "snowflake_user",
        "snowflake_role",
        "snowflake_warehouse",
        "snowflake_database",
        "snowflake_schema",
        "snowflake_private_key_file",
        mode="before",
    )
    @classmethod
    def empty_to_none(cls, value: str | None) -> str | None:
        """Convert empty strings to None."""
        if value is None or len(value) == 0:
            return None
        return value

    @field_validator("snowflake_password", "snowflake_private_key_password", mode="before")
    @classmethod
    def decode_secret(cls, value: str | None) -> str | None:
        """Decode the secret if it is not None or empty string."""
        if value is None or len(value) == 0:
            return None
        return decode_string(value)

    @field_validator("snowflake_authenticator", mode="before")
    @classmethod
    def check_snowflake_authenticator(cls, value: str | None) -> str | None:
        """Normalize the authenticator name, treating an empty string as None."""
        if value is None or len(value) == 0:
            return None
        return value.upper()

    @field_validator("data_source_type", "environment", mode="before")
    @classmethod
    def upper_case_enum(cls, value: object) -> object:
        """Accept lower case enum names from the environment."""
        if isinstance(value, str):
            return value.upper()
        return value

    def to_data_source_configuration(self) -> DataSourceConfiguration:
        """
        Build the explicit connection settings handed to the query executor.

        Returns:
            DataSourceConfiguration: Settings for the configured data source.
        """
        return DataSourceConfiguration(
            data_source_type=self.data_source_type,
            sqlite_database=self.sqlite_database,
            account=self.snowflake_account,
            user=self.snowflake_user,
            password=self.snowflake_password,
            role=self.snowflake_role,
            warehouse=self.snowflake_warehouse,
            database=self.snowflake_database,
            table_schema=self.snowflake_schema,
            authenticator=self.snowflake_authenticator,
            private_key_file=self.snowflake_private_key_file,
            private_key_password=self.snowflake_private_key_password,
        )


def load_environment_configuration() -> EnvironmentConfiguration:
    """
    Read the environment once at process start.

    Returns:
        EnvironmentConfiguration: Settings read from the environment and .env file.
    """
    return EnvironmentConfiguration()
