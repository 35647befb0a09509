"""Unit tests for loading the YAML template catalog."""

from pathlib import Path

import pytest

from claims_query_catalog.custom_exceptions import (
    ConfigurationFileNotFoundException,
    ConfigurationLoadException,
    ConfigurationValidationException,
)
from claims_query_catalog.definitions import ParameterType
from claims_query_catalog.tools.template_loader import load_template_store, load_templates


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "templates.yaml"
    path.write_text(text, encoding="utf-8")
    return path


VALID_CATALOG = """
schema_version: 1
templates:
  - id: claims_over
    category: filtering
    description: Claims over an amount.
    sql_text: SELECT claim_id FROM claims WHERE claim_amt > {{min_amt}}
    parameters:
      - name: min_amt
        type: number
"""


class TestPackagedCatalog:
    """The catalog shipped with the package loads cleanly."""

    def test_loads(self) -> None:
        templates = load_templates()
        ids = [template.id for template in templates]
        assert "avg_claim_by_car_type" in ids
        assert "heavy_hitters" in ids
        assert len(ids) == len(set(ids))

    def test_heavy_hitters_schema(self) -> None:
        store = load_template_store()
        (multiplier,) = store.get("heavy_hitters").parameters
        assert multiplier.name == "multiplier"
        assert multiplier.type == ParameterType.NUMBER
        assert multiplier.required is True

    def test_avg_claim_by_car_type_has_no_parameters(self) -> None:
        assert load_template_store().get("avg_claim_by_car_type").parameters == ()


class TestLoaderErrors:
    """Malformed catalogs are rejected with configuration exceptions."""

    def test_valid_file(self, tmp_path: Path) -> None:
        (template,) = load_templates(_write(tmp_path, VALID_CATALOG))
        assert template.id == "claims_over"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationFileNotFoundException) as exc_info:
            load_templates(tmp_path / "missing.yaml")
        assert exc_info.value.template_file == tmp_path / "missing.yaml"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationLoadException):
            load_templates(_write(tmp_path, "templates: [unclosed"))

    def test_empty_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationValidationException):
            load_templates(_write(tmp_path, ""))

    def test_missing_templates_key(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationValidationException):
            load_templates(_write(tmp_path, "schema_version: 1\n"))

    def test_unsupported_schema_version(self, tmp_path: Path) -> None:
        text = VALID_CATALOG.replace("schema_version: 1", "schema_version: 2")
        with pytest.raises(ConfigurationValidationException, match="schema_version"):
            load_templates(_write(tmp_path, text))

    def test_undeclared_placeholder(self, tmp_path: Path) -> None:
        text = VALID_CATALOG.replace("{{min_amt}}", "{{max_amt}}")
        with pytest.raises(ConfigurationValidationException, match="max_amt") as exc_info:
            load_templates(_write(tmp_path, text))
        assert exc_info.value.template_id == "claims_over"

    def test_declared_parameter_missing_from_sql(self, tmp_path: Path) -> None:
        text = VALID_CATALOG.replace("> {{min_amt}}", "> 100")
        with pytest.raises(ConfigurationValidationException):
            load_templates(_write(tmp_path, text))

    def test_unknown_parameter_type(self, tmp_path: Path) -> None:
        text = VALID_CATALOG.replace("type: number", "type: money")
        with pytest.raises(ConfigurationValidationException):
            load_templates(_write(tmp_path, text))

    def test_default_on_required_parameter(self, tmp_path: Path) -> None:
        text = VALID_CATALOG.replace("type: number", "type: number\n        default: 5")
        with pytest.raises(ConfigurationValidationException):
            load_templates(_write(tmp_path, text))

    def test_duplicate_ids(self, tmp_path: Path) -> None:
        record = VALID_CATALOG.split("templates:\n", 1)[1]
        text = VALID_CATALOG + record
        with pytest.raises(ConfigurationValidationException, match="Duplicate"):
            load_template_store(_write(tmp_path, text))
