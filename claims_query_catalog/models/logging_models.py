from __future__ import annotations
from pydantic import BaseModel, Field
from claims_query_catalog.definitions.custom_definitions import DataSourceType, ExecutionStatus


class QueryExecutionLog(BaseModel):
    """
    Model for logging a single template run.
    """

    id: str = Field(..., title="ID", description="Run id")
    template_id: str = Field(..., title="Template ID", description="Template that was run")
    data_source_type: DataSourceType | None = Field(
        default=None, title="Data Source", description="Data source the statement ran on"
    )
    parameter_names: list[str] = Field(
        default_factory=list,
        title="Parameter Names",
        description="Names of the supplied parameters; values are never logged",
    )
    status: ExecutionStatus = Field(
        default=ExecutionStatus.STARTING, title="Status", description="Run status"
    )
    row_count: int = Field(
        default=0, title="Row Count", description="Rows returned by the data source"
    )
    query_duration: str | None = Field(
        default=None, title="Query Duration", description="Seconds from lookup to last row"
    )
    execution_timestamp: str | None = Field(
        default=None, title="Execution Timestamp", description="ISO timestamp of the run start"
    )
    general_error_message: str | None = Field(
        default=None, title="Error Message", description="Message of the exception that ended the run"
    )
