from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any
from claims_query_catalog.definitions.custom_definitions import ExecutionStatus
from claims_query_catalog.logger import d_logger, logger
from claims_query_catalog.models.catalog_models import (
    BoundStatement,
    QueryTemplate,
    ResultSet,
    TemplateParameter,
)
from claims_query_catalog.models.data_source_models import DataSourceConfiguration
from claims_query_catalog.models.logging_models import QueryExecutionLog
from claims_query_catalog.operations.query_executor import QueryExecutor
from claims_query_catalog.tools.parameter_binder import bind as bind_parameters
from claims_query_catalog.tools.template_loader import load_template_store
from claims_query_catalog.tools.template_store import TemplateListing, TemplateStore


class QueryCatalog:
    """
    Entry point for listing, binding and running claims query templates.
    """

    def __init__(self, store: TemplateStore, executor: QueryExecutor) -> None:
        self.store = store
        self.executor = executor

    @classmethod
    def from_configuration(
        cls,
        configuration: DataSourceConfiguration,
        template_path: str | Path | None = None,
    ) -> QueryCatalog:
        """
        Build a catalog from a template file and data source settings.

        Params:
            configuration (DataSourceConfiguration): Connection settings for the executor.
            template_path (str | Path | None): Template catalog; the packaged catalog when None.

        Returns:
            QueryCatalog: Catalog wired to the loaded store and a new executor.
        """
        return cls(load_template_store(template_path), QueryExecutor(configuration))

    def list_templates(self, category: str | None = None) -> TemplateListing:
        return self.store.list(category)

    def get_template(self, template_id: str) -> QueryTemplate:
        return self.store.get(template_id)

    def get_parameter_schema(self, template_id: str) -> tuple[TemplateParameter, ...]:
        """Ordered parameter declarations of a template."""
        return self.store.get(template_id).parameters

    def bind(self, template_id: str, parameters: Mapping[str, Any]) -> BoundStatement:
        """Bind a template without executing it."""
        return bind_parameters(self.store.get(template_id), parameters)

    def run(self, template_id: str, parameters: Mapping[str, Any] | None = None) -> ResultSet:
        """
        Look up a template, bind the parameters and execute the statement.

        Errors are re-raised exactly as the failing step raised them, so callers
        can tell a missing template from a missing parameter, a type mismatch,
        an unreachable data source or a rejected statement.

        Params:
            template_id (str): Id of the template to run.
            parameters (Mapping[str, Any] | None): Values by parameter name.

        Returns:
            ResultSet: Rows returned by the data source.

        Raises:
            TemplateNotFoundException: If the template id is unknown.
            MissingParameterException: If a required parameter is absent.
            ParameterTypeMismatchException: If a value has the wrong type.
            DataSourceConnectionException: If the data source is unreachable.
            QueryExecutionException: If the data source rejects the statement.
        """
        execution_start = datetime.now()
        execution_log = QueryExecutionLog(
            id=str(uuid.uuid4()),
            template_id=template_id,
            data_source_type=self.executor.configuration.data_source_type,
            parameter_names=sorted(parameters or {}),
            execution_timestamp=execution_start.isoformat(),
        )

        try:
            template = self.store.get(template_id)
            bound_statement = bind_parameters(template, parameters or {})
            result_set = self.executor.execute(bound_statement)
        except Exception as e:
            duration = (datetime.now() - execution_start).total_seconds()
            execution_log.status = ExecutionStatus.FAIL
            execution_log.query_duration = f"{duration:.3f}s"
            execution_log.general_error_message = str(e)
            logger.error(f"Template {template_id} failed after {duration:.3f}s: {e}")
            d_logger.debug(f"Execution log: {execution_log.model_dump_json()}")
            raise

        duration = (datetime.now() - execution_start).total_seconds()
        execution_log.status = ExecutionStatus.SUCCESS
        execution_log.row_count = len(result_set)
        execution_log.query_duration = f"{duration:.3f}s"
        logger.info(
            f"Template {template_id} returned {len(result_set)} rows in {duration:.3f}s"
        )
        d_logger.debug(f"Execution log: {execution_log.model_dump_json()}")
        return result_set
