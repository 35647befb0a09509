from __future__ import annotations

import re
from typing import Any
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from claims_query_catalog.definitions.custom_definitions import ParameterType
from claims_query_catalog.definitions.parameter_types import matches_parameter_type

# Named placeholder written as {{name}} inside template SQL
PLACEHOLDER_REGEX = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")
IDENTIFIER_REGEX = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def placeholder_names(sql_text: str) -> list[str]:
    """
    List the placeholder names of a template in order of appearance.

    A placeholder used more than once is listed once per use.

    Params:
        sql_text (str): Template SQL containing {{name}} placeholders.

    Returns:
        list[str]: Placeholder names in the order they appear.
    """
    return [match.group(1) for match in PLACEHOLDER_REGEX.finditer(sql_text)]


class TemplateParameter(BaseModel):
    """
    Declared parameter of a query template.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Placeholder name used in the template SQL")
    type: ParameterType = Field(..., description="Semantic type of the value")
    required: bool = Field(default=True, description="Whether callers must supply it")
    default: Any = Field(
        default=None, description="Value bound when an optional parameter is omitted"
    )
    description: str = Field(default="", description="What the parameter controls")

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        """Parameter names must be usable as placeholder names."""
        if not IDENTIFIER_REGEX.match(value):
            raise ValueError(f"Invalid parameter name: {value!r}")
        return value

    @model_validator(mode="after")
    def check_default(self) -> TemplateParameter:
        """Defaults are only meaningful for optional parameters and must match the type."""
        if self.default is None:
            return self
        if self.required:
            raise ValueError(
                f"Required parameter '{self.name}' cannot declare a default"
            )
        if not matches_parameter_type(self.type, self.default):
            raise ValueError(
                f"Default for parameter '{self.name}' is not a valid {self.type}"
            )
        return self


class QueryTemplate(BaseModel):
    """
    Named, parameterized SQL query pattern.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique template id")
    category: str = Field(..., description="Category tag, e.g. fraud_detection")
    description: str = Field(default="", description="What the query answers")
    sql_text: str = Field(..., description="SQL with {{name}} placeholders")
    parameters: tuple[TemplateParameter, ...] = Field(
        default=(), description="Ordered parameter schema"
    )

    @field_validator("id", "category", "sql_text")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        """Reject blank ids, categories and SQL."""
        if not value or not value.strip():
            raise ValueError("Value must not be blank")
        return value.strip()

    @model_validator(mode="after")
    def check_placeholders(self) -> QueryTemplate:
        """Placeholders and declared parameters must match one to one."""
        declared = [parameter.name for parameter in self.parameters]
        duplicates = sorted({name for name in declared if declared.count(name) > 1})
        if duplicates:
            raise ValueError(
                f"Template '{self.id}' declares duplicate parameters: {duplicates}"
            )

        used = set(placeholder_names(self.sql_text))
        undeclared = sorted(used - set(declared))
        if undeclared:
            raise ValueError(
                f"Template '{self.id}' uses undeclared placeholders: {undeclared}"
            )
        unused = sorted(set(declared) - used)
        if unused:
            raise ValueError(
                f"Template '{self.id}' declares parameters missing from its SQL: {unused}"
            )
        return self

    def get_parameter(self, name: str) -> TemplateParameter | None:
        """Return the declared parameter with the given name, if any."""
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None


class BoundStatement(BaseModel):
    """
    Template SQL with positional markers and the values to send alongside it.
    """

    model_config = ConfigDict(frozen=True)

    template_id: str = Field(..., description="Template the statement was bound from")
    sql: str = Field(..., description="SQL with ? markers, never containing values")
    values: tuple[Any, ...] = Field(
        default=(), description="Values in placeholder order"
    )


class ResultSet(BaseModel):
    """
    Rows returned by a data source, each row a mapping of column name to value.
    """

    model_config = ConfigDict(frozen=True)

    columns: tuple[str, ...] = Field(default=(), description="Ordered column names")
    rows: list[dict[str, Any]] = Field(default_factory=list, description="Ordered rows")

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_dataframe(self) -> pd.DataFrame:
        """Return the rows as a pandas DataFrame with columns in result order."""
        return pd.DataFrame(self.rows, columns=list(self.columns))
