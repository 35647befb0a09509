"""
Definitions Module
==================

This module provides Enum definitions for standardizing constant values used
throughout the claims query catalog.

Enums:
    - ApplicationEnvironment: Environment types (DEV, TEST, PROD)
    - DataSourceType: Relational data sources a template can run against
    - ParameterType: Semantic types of template parameters
    - ExecutionStatus: Status values for execution tracking
    - OutputFormat: Supported result export formats
    - SnowflakeAuthenticatorType: Authentication methods for Snowflake
"""

from claims_query_catalog.definitions.custom_definitions import (
    ApplicationEnvironment,
    DataSourceType,
    ExecutionStatus,
    OutputFormat,
    ParameterType,
    SnowflakeAuthenticatorType,
)

__all__ = [
    "ApplicationEnvironment",
    "DataSourceType",
    "ParameterType",
    "ExecutionStatus",
    "OutputFormat",
    "SnowflakeAuthenticatorType",
]
