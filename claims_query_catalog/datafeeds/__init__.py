"""
Datafeeds Module
================

This module exports the rows of catalog queries to files.

Functions:
    - write_result_set: Write a ResultSet to .csv or .xlsx by extension
    - write_to_csv: Write a ResultSet with pandas
    - write_to_excel: Write a ResultSet with openpyxl formatting
"""

from claims_query_catalog.datafeeds.result_writer import (
    write_result_set,
    write_to_csv,
    write_to_excel,
)

__all__ = [
    "write_result_set",
    "write_to_csv",
    "write_to_excel",
]
