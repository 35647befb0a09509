"""
SQL Module
==========

This module holds the query template catalog for the claims domain.

Structure:
    sql/
        claims_query_templates.yaml
            - Templates grouped by category: aggregation, filtering,
              fraud_detection, window_functions, reporting
"""

__all__ = []
