"""
Models Module
=============

This module provides Pydantic models for the query templates, bound statements,
results and connection settings of the claims query catalog.

Models:
    - TemplateParameter: Declared parameter of a query template
    - QueryTemplate: Named, parameterized SQL query pattern
    - BoundStatement: SQL with positional markers plus ordered values
    - ResultSet: Rows returned by the data source
    - DataSourceConfiguration: Connection settings for the query executor
    - QueryExecutionLog: Model for execution logging

Functions:
    - placeholder_names: List {{name}} placeholders of a template in order
"""

from claims_query_catalog.models.catalog_models import (
    BoundStatement,
    QueryTemplate,
    ResultSet,
    TemplateParameter,
    placeholder_names,
)
from claims_query_catalog.models.data_source_models import DataSourceConfiguration
from claims_query_catalog.models.logging_models import QueryExecutionLog

__all__ = [
    "TemplateParameter",
    "QueryTemplate",
    "BoundStatement",
    "ResultSet",
    "DataSourceConfiguration",
    "QueryExecutionLog",
    "placeholder_names",
]
