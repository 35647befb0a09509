"""
Catalog Exceptions
==================

Custom exceptions raised while looking up templates and binding parameters.
"""


class CatalogException(Exception):
    """Base exception for template catalog errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TemplateNotFoundException(CatalogException):
    """Exception raised when no template matches the requested id."""

    def __init__(self, template_id: str):
        super().__init__(f"Query template not found: '{template_id}'")
        self.template_id = template_id


class MissingParameterException(CatalogException):
    """Exception raised when a required template parameter is absent."""

    def __init__(self, template_id: str, parameter_name: str):
        super().__init__(
            f"Template '{template_id}' requires parameter '{parameter_name}'"
        )
        self.template_id = template_id
        self.parameter_name = parameter_name


class ParameterTypeMismatchException(CatalogException):
    """Exception raised when a parameter value does not match its declared type."""

    def __init__(self, parameter_name: str, expected_type: str, value: object):
        super().__init__(
            f"Parameter '{parameter_name}' expects {expected_type}, "
            f"got {type(value).__name__}: {value!r}"
        )
        self.parameter_name = parameter_name
        self.expected_type = expected_type


class UnsupportedOutputFormatException(CatalogException):
    """Exception raised when results are exported to an unknown file type."""

    def __init__(self, message: str):
        super().__init__(message)
