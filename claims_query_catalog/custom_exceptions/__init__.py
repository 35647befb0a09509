"""
Custom Exceptions Module
=========================

This module provides custom exception classes for handling the error scenarios
of the claims query catalog.

Exception Hierarchy:
    - CatalogException: Base for template lookup and binding errors
        - TemplateNotFoundException
        - MissingParameterException
        - ParameterTypeMismatchException
        - UnsupportedOutputFormatException
    - ConfigurationException: Base for configuration errors
        - ConfigurationFileNotFoundException
        - ConfigurationLoadException
        - ConfigurationValidationException
    - DataSourceException: Base for data source errors
        - DataSourceConnectionException
        - QueryExecutionException
        - DataSourceCredentialException
        - DataSourcePrivateKeyException
"""

from claims_query_catalog.custom_exceptions.catalog_exceptions import (
    CatalogException,
    MissingParameterException,
    ParameterTypeMismatchException,
    TemplateNotFoundException,
    UnsupportedOutputFormatException,
)
from claims_query_catalog.custom_exceptions.configuration_exceptions import (
    ConfigurationException,
    ConfigurationFileNotFoundException,
    ConfigurationLoadException,
    ConfigurationValidationException,
)
from claims_query_catalog.custom_exceptions.data_source_exceptions import (
    DataSourceConnectionException,
    DataSourceCredentialException,
    DataSourceException,
    DataSourcePrivateKeyException,
    QueryExecutionException,
)

__all__ = [
    "CatalogException",
    "TemplateNotFoundException",
    "MissingParameterException",
    "ParameterTypeMismatchException",
    "UnsupportedOutputFormatException",
    "ConfigurationException",
    "ConfigurationFileNotFoundException",
    "ConfigurationLoadException",
    "ConfigurationValidationException",
    "DataSourceException",
    "DataSourceConnectionException",
    "QueryExecutionException",
    "DataSourceCredentialException",
    "DataSourcePrivateKeyException",
]
