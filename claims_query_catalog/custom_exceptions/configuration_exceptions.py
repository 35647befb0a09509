"""
Configuration Exceptions
========================

Custom exceptions raised while reading a template catalog file.
"""

from pathlib import Path


class ConfigurationException(Exception):
    """Base exception for template catalog configuration errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationFileNotFoundException(ConfigurationException):
    """Exception raised when the template catalog file does not exist."""

    def __init__(self, template_file: Path):
        super().__init__(f"Template file not found: {template_file}")
        self.template_file = template_file


class ConfigurationLoadException(ConfigurationException):
    """Exception raised when the template catalog file cannot be read or parsed as YAML."""

    def __init__(self, template_file: Path, reason: object):
        super().__init__(f"Could not load template file {template_file}: {reason}")
        self.template_file = template_file


class ConfigurationValidationException(ConfigurationException):
    """Exception raised when the catalog structure or one of its templates is invalid."""

    def __init__(self, message: str, template_id: str | None = None):
        super().__init__(message)
        self.template_id = template_id
