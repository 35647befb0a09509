from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable
from claims_query_catalog.definitions.custom_definitions import ParameterType


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_integer(value: Any) -> bool:
    # bool is an int subclass and must not pass as a count or id
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _is_date(value: Any) -> bool:
    return isinstance(value, date) and not isinstance(value, datetime)


def _is_datetime(value: Any) -> bool:
    return isinstance(value, datetime)


PARAMETER_TYPE_CHECKS: dict[ParameterType, Callable[[Any], bool]] = {
    ParameterType.STRING: _is_string,
    ParameterType.INTEGER: _is_integer,
    ParameterType.NUMBER: _is_number,
    ParameterType.BOOLEAN: _is_boolean,
    ParameterType.DATE: _is_date,
    ParameterType.DATETIME: _is_datetime,
}


def matches_parameter_type(parameter_type: ParameterType, value: Any) -> bool:
    """
    Check whether a value is compatible with a declared semantic type.

    No coercion is attempted: the string "10" is not an integer.

    Params:
        parameter_type (ParameterType): The declared semantic type.
        value (Any): The candidate value.

    Returns:
        bool: True when the value can be bound as the declared type.
    """
    return PARAMETER_TYPE_CHECKS[parameter_type](value)
