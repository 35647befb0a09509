"""
Connector Module
================

This module provides connectors for running bound statements against a
relational data source.

Classes:
    BaseConnector: Abstract base class defining the connector interface
    SqliteConnector: Connector for a local SQLite database file
    SnowparkConnector: Connector for Snowflake using Snowpark

Functions:
    create_connector: Build the connector registered for a data source type

Usage:
    from claims_query_catalog.connector import create_connector
    from claims_query_catalog.models import DataSourceConfiguration

    configuration = DataSourceConfiguration(sqlite_database="claims.db")
    with create_connector(configuration) as connector:
        result_set = connector.execute("SELECT * FROM claims WHERE claim_amt > ?", [1000])
"""

from claims_query_catalog.connector.base_connector import BaseConnector
from claims_query_catalog.connector.connector_registry import CONNECTORS, create_connector
from claims_query_catalog.connector.snowpark_connector import SnowparkConnector
from claims_query_catalog.connector.sqlite_connector import SqliteConnector

__all__ = [
    "BaseConnector",
    "SqliteConnector",
    "SnowparkConnector",
    "CONNECTORS",
    "create_connector",
]
