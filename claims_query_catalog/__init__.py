"""
Claims Query Catalog
====================

Parameterized SQL query templates for the insurance claims domain (clients,
cars, claims), with binding that always keeps values out of the SQL text.

Usage:
    from claims_query_catalog.models import DataSourceConfiguration
    from claims_query_catalog.tools import QueryCatalog

    catalog = QueryCatalog.from_configuration(
        DataSourceConfiguration(sqlite_database="claims.db")
    )
    result_set = catalog.run("heavy_hitters", {"multiplier": 10})
"""

__version__ = "0.1.0"
