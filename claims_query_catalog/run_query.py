import argparse
import sys
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any, Callable
from claims_query_catalog.custom_exceptions.catalog_exceptions import (
    CatalogException,
    ParameterTypeMismatchException,
)
from claims_query_catalog.custom_exceptions.configuration_exceptions import (
    ConfigurationException,
)
from claims_query_catalog.custom_exceptions.data_source_exceptions import (
    DataSourceException,
)
from claims_query_catalog.datafeeds.result_writer import write_result_set
from claims_query_catalog.definitions.custom_definitions import ParameterType
from claims_query_catalog.environment import load_environment_configuration
from claims_query_catalog.logger import logger
from claims_query_catalog.models.catalog_models import QueryTemplate, TemplateParameter
from claims_query_catalog.tools.query_catalog import QueryCatalog

TRUE_LITERALS = ("true", "1", "yes")
FALSE_LITERALS = ("false", "0", "no")


def _parse_boolean(raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_LITERALS:
        return True
    if value in FALSE_LITERALS:
        return False
    raise ValueError(f"Expected one of {TRUE_LITERALS + FALSE_LITERALS}, got {raw!r}")


PARAMETER_PARSERS: dict[ParameterType, Callable[[str], Any]] = {
    ParameterType.STRING: str,
    ParameterType.INTEGER: int,
    ParameterType.NUMBER: float,
    ParameterType.BOOLEAN: _parse_boolean,
    ParameterType.DATE: date.fromisoformat,
    ParameterType.DATETIME: datetime.fromisoformat,
}


def parse_parameter_value(parameter: TemplateParameter, raw: str) -> Any:
    """
    Parse a command line literal into the parameter's declared type.

    Args:
        parameter (TemplateParameter): The declared parameter.
        raw (str): The literal as typed, e.g. "10" or "2024-01-31".

    Returns:
        Any: The typed value.

    Raises:
        ParameterTypeMismatchException: If the literal is not valid for the type.
    """
    try:
        return PARAMETER_PARSERS[parameter.type](raw.strip())
    except ValueError:
        raise ParameterTypeMismatchException(parameter.name, parameter.type.value, raw) from None


def parse_cli_parameters(template: QueryTemplate, assignments: Sequence[str]) -> dict[str, Any]:
    """
    Turn ``name=value`` assignments into typed parameter values.

    Names the template does not declare are kept as plain strings; binding ignores them.

    Args:
        template (QueryTemplate): Template the parameters are for.
        assignments (Sequence[str]): Raw ``name=value`` strings.

    Returns:
        dict[str, Any]: Values by parameter name.

    Raises:
        ValueError: If an assignment has no ``=``.
    """
    parameters: dict[str, Any] = {}
    for assignment in assignments:
        name, separator, raw = assignment.partition("=")
        name = name.strip()
        if not separator or not name:
            raise ValueError(f"Parameters must look like name=value, got {assignment!r}")
        parameter = template.get_parameter(name)
        parameters[name] = raw if parameter is None else parse_parameter_value(parameter, raw)
    return parameters


def create_parser() -> argparse.ArgumentParser:
    """
    Create the command line parser.

    Returns:
        argparse.ArgumentParser: Parser for listing, describing and running templates.
    """
    parser = argparse.ArgumentParser(
        description="List, describe and run claims query templates.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  claims-query-catalog --list --category fraud_detection\n"
            "  claims-query-catalog --describe heavy_hitters\n"
            "  claims-query-catalog --template-id heavy_hitters --param multiplier=10 --output hh.xlsx"
        ),
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--list", action="store_true", help="List templates")
    action.add_argument("--describe", metavar="TEMPLATE_ID", help="Show a template's parameters")
    action.add_argument("--template-id", help="Template to run")

    parser.add_argument("--category", default=None, help="Only list templates of this category")
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Parameter value; repeat for several parameters",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the bound SQL and values instead of running the template",
    )
    parser.add_argument("--output", default=None, help="Write rows to this .csv or .xlsx file")
    parser.add_argument(
        "--template-file",
        default=None,
        help="Template catalog YAML (defaults to CLAIMS_CATALOG_TEMPLATE_FILE or the packaged catalog)",
    )
    return parser


def _print_templates(catalog: QueryCatalog, category: str | None) -> None:
    for template in catalog.list_templates(category):
        print(f"{template.id:<32} {template.category:<18} {template.description}")


def _print_schema(catalog: QueryCatalog, template_id: str) -> None:
    template = catalog.get_template(template_id)
    print(f"{template.id} ({template.category})")
    print(f"  {template.description}")
    if not template.parameters:
        print("  No parameters")
    for parameter in template.parameters:
        requirement = "required" if parameter.required else f"optional, default {parameter.default!r}"
        print(f"  {parameter.name}: {parameter.type.value} ({requirement}) {parameter.description}")


def _run_template(catalog: QueryCatalog, args: argparse.Namespace) -> None:
    template = catalog.get_template(args.template_id)
    parameters = parse_cli_parameters(template, args.param)

    if args.dry_run:
        bound_statement = catalog.bind(args.template_id, parameters)
        print(bound_statement.sql)
        print(f"-- values: {list(bound_statement.values)!r}")
        return

    result_set = catalog.run(args.template_id, parameters)
    if args.output:
        write_result_set(result_set, args.output, sheet_name=args.template_id[:31])
    elif result_set.is_empty:
        print("No rows returned")
    else:
        print(result_set.to_dataframe().to_string(index=False))


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line interface.

    Args:
        argv (Sequence[str] | None): Arguments; sys.argv when None.

    Returns:
        int: Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        environment_configuration = load_environment_configuration()
        catalog = QueryCatalog.from_configuration(
            environment_configuration.to_data_source_configuration(),
            args.template_file or environment_configuration.template_file,
        )

        if args.list:
            _print_templates(catalog, args.category)
        elif args.describe:
            _print_schema(catalog, args.describe)
        else:
            _run_template(catalog, args)
    except ValueError as e:
        parser.error(str(e))
    except (CatalogException, ConfigurationException, DataSourceException) as e:
        logger.error(f"{type(e).__name__}: {e.message}")
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
