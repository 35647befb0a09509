"""
Operations Module
=================

This module provides the operations that sit between the catalog and a data
source: secret decoding, private key loading and statement execution.

Functions:
    Obfuscation Operations:
        - encode_string: Encode strings to Base64
        - decode_string: Decode Base64 strings
        - load_private_key: Load a PEM private key as DER bytes for Snowflake

    Query Execution (claims_query_catalog.operations.query_executor):
        - QueryExecutor: Runs bound statements against the configured data source
"""

from claims_query_catalog.operations.obfuscation_operations import (
    decode_string,
    encode_string,
    load_private_key,
)

__all__ = [
    "encode_string",
    "decode_string",
    "load_private_key",
]
