from pathlib import Path
from typing import Any
import yaml
from pydantic import ValidationError
from claims_query_catalog.custom_exceptions.configuration_exceptions import (
    ConfigurationFileNotFoundException,
    ConfigurationLoadException,
    ConfigurationValidationException,
)
from claims_query_catalog.logger import logger
from claims_query_catalog.models.catalog_models import QueryTemplate
from claims_query_catalog.tools.template_store import TemplateStore

SUPPORTED_SCHEMA_VERSIONS = (1,)
DEFAULT_TEMPLATE_FILE: Path = (
    Path(__file__).parent.parent / "sql" / "claims_query_templates.yaml"
)


def load_templates(path: str | Path | None = None) -> list[QueryTemplate]:
    """
    Loads query templates from a YAML catalog file.

    The file holds a ``schema_version`` and a ``templates`` list; each record has
    ``id``, ``category``, ``description``, ``sql_text`` and ``parameters``.

    Params:
        path (str | Path | None): Catalog file; the packaged catalog when None.

    Returns:
        list[QueryTemplate]: Templates in the order they are declared.

    Raises:
        ConfigurationFileNotFoundException: If the file does not exist.
        ConfigurationLoadException: If the file is not valid YAML.
        ConfigurationValidationException: If the catalog structure or a template is invalid.
    """
    template_file = Path(path) if path is not None else DEFAULT_TEMPLATE_FILE

    data: dict[str, Any] | None = None
    try:
        with open(template_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationFileNotFoundException(template_file) from None
    except (yaml.YAMLError, OSError) as e:
        logger.error(f"Could not load template file {template_file}: {e}")
        raise ConfigurationLoadException(template_file, e)

    if data is None:
        raise ConfigurationValidationException(
            "Template file is empty or contains no valid data"
        )
    if not isinstance(data, dict) or "templates" not in data:
        raise ConfigurationValidationException(
            "Template file must contain a 'templates' key at the root level"
        )

    schema_version = data.get("schema_version")
    if schema_version not in SUPPORTED_SCHEMA_VERSIONS:
        raise ConfigurationValidationException(
            f"Unsupported template schema_version {schema_version!r}; "
            f"expected one of {list(SUPPORTED_SCHEMA_VERSIONS)}"
        )

    records = data["templates"] or []
    if not isinstance(records, list):
        raise ConfigurationValidationException("'templates' must be a list of records")

    templates: list[QueryTemplate] = []
    for position, record in enumerate(records):
        try:
            templates.append(QueryTemplate.model_validate(record))
        except ValidationError as e:
            template_id = record.get("id") if isinstance(record, dict) else None
            raise ConfigurationValidationException(
                f"Invalid template #{position} ({template_id!r}): {e}",
                template_id=template_id,
            )

    logger.info(f"Loaded {len(templates)} query templates from {template_file}")
    return templates


def load_template_store(path: str | Path | None = None) -> TemplateStore:
    """
    Load a catalog file into a read-only TemplateStore.

    Params:
        path (str | Path | None): Catalog file; the packaged catalog when None.

    Returns:
        TemplateStore: Store holding every template of the file.
    """
    return TemplateStore(load_templates(path))
