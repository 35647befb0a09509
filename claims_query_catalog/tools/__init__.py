"""
Tools Module
============

This module provides the catalog itself: loading templates, storing them,
binding parameters and running templates.

Classes:
    - TemplateStore: Read-only templates keyed by id
    - TemplateListing: Restartable, filtered view over a TemplateStore
    - QueryCatalog: Lists, binds and runs templates

Functions:
    - load_templates: Load templates from a YAML catalog file
    - load_template_store: Load a YAML catalog file into a TemplateStore
    - bind: Pair parameter values with a template's placeholders
    - resolve_parameter_values: Validate values against a parameter schema
"""

from claims_query_catalog.tools.parameter_binder import bind, resolve_parameter_values
from claims_query_catalog.tools.query_catalog import QueryCatalog
from claims_query_catalog.tools.template_loader import load_template_store, load_templates
from claims_query_catalog.tools.template_store import TemplateListing, TemplateStore

__all__ = [
    "TemplateStore",
    "TemplateListing",
    "QueryCatalog",
    "load_templates",
    "load_template_store",
    "bind",
    "resolve_parameter_values",
]
