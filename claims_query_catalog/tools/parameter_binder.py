from collections.abc import Mapping
from typing import Any
from claims_query_catalog.custom_exceptions.catalog_exceptions import (
    MissingParameterException,
    ParameterTypeMismatchException,
)
from claims_query_catalog.definitions.parameter_types import matches_parameter_type
from claims_query_catalog.logger import d_logger
from claims_query_catalog.models.catalog_models import (
    PLACEHOLDER_REGEX,
    BoundStatement,
    QueryTemplate,
    placeholder_names,
)

POSITIONAL_MARKER = "?"


def resolve_parameter_values(
    template: QueryTemplate, parameters: Mapping[str, Any]
) -> dict[str, Any]:
    """
    Validate supplied values against the template's parameter schema.

    Keys that the template does not declare are ignored. Absent optional
    parameters resolve to their declared default.

    Args:
        template (QueryTemplate): The template being bound.
        parameters (Mapping[str, Any]): Caller-supplied values by parameter name.

    Returns:
        dict[str, Any]: Value for every declared parameter.

    Raises:
        MissingParameterException: If a required parameter is absent or None.
        ParameterTypeMismatchException: If a value does not match its declared type.
    """
    resolved: dict[str, Any] = {}
    for parameter in template.parameters:
        value = parameters.get(parameter.name)
        if value is None:
            if parameter.required:
                raise MissingParameterException(template.id, parameter.name)
            resolved[parameter.name] = parameter.default
            continue
        if not matches_parameter_type(parameter.type, value):
            raise ParameterTypeMismatchException(
                parameter.name, parameter.type.value, value
            )
        resolved[parameter.name] = value
    return resolved


def bind(template: QueryTemplate, parameters: Mapping[str, Any]) -> BoundStatement:
    """
    Bind caller values to a template without touching the query structure.

    Every ``{{name}}`` placeholder becomes a positional ``?`` marker and its
    value is appended to the ordered value list, so the SQL text is the same
    for any set of values. A placeholder used twice contributes its value twice.

    Args:
        template (QueryTemplate): The template to bind.
        parameters (Mapping[str, Any]): Caller-supplied values by parameter name.

    Returns:
        BoundStatement: SQL with markers plus the values in marker order.

    Raises:
        MissingParameterException: If a required parameter is absent or None.
        ParameterTypeMismatchException: If a value does not match its declared type.
    """
    resolved = resolve_parameter_values(template, parameters)
    values = tuple(resolved[name] for name in placeholder_names(template.sql_text))
    sql = PLACEHOLDER_REGEX.sub(POSITIONAL_MARKER, template.sql_text)

    d_logger.debug(f"Bound template {template.id} with {len(values)} values: {sql}")
    return BoundStatement(template_id=template.id, sql=sql, values=values)
