"""Scenario tests for running templates through the catalog against SQLite."""

from collections import defaultdict
from datetime import date
from pathlib import Path

import pytest

from claims_query_catalog.custom_exceptions import (
    DataSourceConnectionException,
    MissingParameterException,
    ParameterTypeMismatchException,
    QueryExecutionException,
    TemplateNotFoundException,
)
from claims_query_catalog.models import DataSourceConfiguration, QueryTemplate
from claims_query_catalog.operations.query_executor import QueryExecutor
from claims_query_catalog.tools.query_catalog import QueryCatalog
from claims_query_catalog.tools.template_store import TemplateStore
from tests.conftest import CARS, CLAIMS


def _claim_amounts() -> list[float]:
    return [claim[3] for claim in CLAIMS]


class TestScenarios:
    """The documented query patterns return the expected rows."""

    def test_avg_claim_by_car_type(self, catalog: QueryCatalog) -> None:
        car_type_by_car = {car[0]: car[2] for car in CARS}
        amounts: dict[str, list[float]] = defaultdict(list)
        for claim in CLAIMS:
            amounts[car_type_by_car[claim[1]]].append(claim[3])

        result_set = catalog.run("avg_claim_by_car_type", {})

        assert result_set.columns == ("car_type", "avg_claim")
        actual = {row["car_type"]: row["avg_claim"] for row in result_set.rows}
        assert set(actual) == set(amounts)
        assert "Pickup" not in actual
        for car_type, values in amounts.items():
            assert actual[car_type] == pytest.approx(sum(values) / len(values))

    def test_heavy_hitters_with_multiplier_ten(self, catalog: QueryCatalog) -> None:
        amounts = _claim_amounts()
        threshold = 10 * sum(amounts) / len(amounts)
        expected = sorted(
            (claim[0] for claim in CLAIMS if claim[3] > threshold),
        )

        result_set = catalog.run("heavy_hitters", {"multiplier": 10})

        assert [row["claim_id"] for row in result_set.rows] == expected == [12]
        assert all(row["claim_amt"] > threshold for row in result_set.rows)

    def test_heavy_hitters_low_multiplier_returns_more(self, catalog: QueryCatalog) -> None:
        amounts = _claim_amounts()
        threshold = 0.05 * sum(amounts) / len(amounts)
        expected = {claim[0] for claim in CLAIMS if claim[3] > threshold}

        result_set = catalog.run("heavy_hitters", {"multiplier": 0.05})

        assert {row["claim_id"] for row in result_set.rows} == expected
        amounts_returned = [row["claim_amt"] for row in result_set.rows]
        assert amounts_returned == sorted(amounts_returned, reverse=True)

    def test_repeat_claimants(self, catalog: QueryCatalog) -> None:
        result_set = catalog.run("repeat_claimants", {"min_claims": 4})
        assert [(row["client_id"], row["claim_count"]) for row in result_set.rows] == [
            (1, 5),
            (2, 4),
        ]

    def test_claims_exceeding_car_value_default_ratio(self, catalog: QueryCatalog) -> None:
        result_set = catalog.run("claims_exceeding_car_value")
        assert [row["claim_id"] for row in result_set.rows] == [12]

    def test_clients_by_state_filter_and_all(self, catalog: QueryCatalog) -> None:
        california = catalog.run("clients_by_state", {"state": "CA"})
        everyone = catalog.run("clients_by_state", {})
        assert [row["client_id"] for row in california.rows] == [1, 3]
        assert [row["client_id"] for row in everyone.rows] == [1, 2, 3, 4]

    def test_claims_in_date_range(self, catalog: QueryCatalog) -> None:
        result_set = catalog.run(
            "claims_in_date_range",
            {"start_date": date(2024, 2, 1), "end_date": date(2024, 3, 31)},
        )
        assert [row["claim_id"] for row in result_set.rows] == [6, 2, 3, 9]

    def test_red_car_claims(self, catalog: QueryCatalog) -> None:
        result_set = catalog.run("red_car_claims", {"red_car": True})
        (row,) = result_set.rows
        assert row["claim_count"] == 6

    def test_top_claims_per_car_type(self, catalog: QueryCatalog) -> None:
        result_set = catalog.run("top_claims_per_car_type", {"top_n": 1})
        assert [(row["car_type"], row["claim_id"]) for row in result_set.rows] == [
            ("Minivan", 10),
            ("SUV", 12),
            ("Sedan", 4),
        ]

    def test_running_claim_total_by_client(self, catalog: QueryCatalog) -> None:
        result_set = catalog.run("running_claim_total_by_client", {"client_id": 3})
        assert [row["running_total"] for row in result_set.rows] == [60.0, 200.0, 300.0]

    def test_every_template_runs(self, catalog: QueryCatalog) -> None:
        sample = {
            "state": "TX",
            "start_date": date(2024, 1, 1),
            "end_date": date(2024, 12, 31),
            "red_car": False,
            "multiplier": 2,
            "min_claims": 1,
            "value_ratio": 0.5,
            "top_n": 2,
            "client_id": 1,
            "min_total": 100,
        }
        for template in catalog.list_templates():
            catalog.run(template.id, sample)


class TestCatalogApi:
    """Listing, schema lookup and dry-run binding."""

    def test_list_templates_by_category(self, catalog: QueryCatalog) -> None:
        assert catalog.list_templates("window_functions").ids() == [
            "top_claims_per_car_type",
            "running_claim_total_by_client",
            "claim_amount_quartiles",
        ]

    def test_get_parameter_schema(self, catalog: QueryCatalog) -> None:
        schema = catalog.get_parameter_schema("claims_in_date_range")
        assert [parameter.name for parameter in schema] == ["start_date", "end_date"]

    def test_bind_does_not_execute(self, template_store: TemplateStore) -> None:
        unreachable = QueryExecutor(DataSourceConfiguration(sqlite_database=None))
        catalog = QueryCatalog(template_store, unreachable)
        bound = catalog.bind("heavy_hitters", {"multiplier": 3})
        assert bound.values == (3,)

    def test_from_configuration_uses_packaged_templates(
        self, data_source_configuration: DataSourceConfiguration
    ) -> None:
        catalog = QueryCatalog.from_configuration(data_source_configuration)
        assert "heavy_hitters" in catalog.store


class TestErrorPropagation:
    """run() re-raises the first failure exactly as raised."""

    def test_unknown_template(self, catalog: QueryCatalog) -> None:
        with pytest.raises(TemplateNotFoundException):
            catalog.run("nonexistent_id", {})

    def test_missing_parameter(self, catalog: QueryCatalog) -> None:
        with pytest.raises(MissingParameterException):
            catalog.run("heavy_hitters", {})

    def test_type_mismatch(self, catalog: QueryCatalog) -> None:
        with pytest.raises(ParameterTypeMismatchException):
            catalog.run("heavy_hitters", {"multiplier": "ten"})

    def test_unreachable_data_source(self, template_store: TemplateStore, tmp_path: Path) -> None:
        configuration = DataSourceConfiguration(
            sqlite_database=str(tmp_path / "missing" / "claims.db")
        )
        catalog = QueryCatalog(template_store, QueryExecutor(configuration))
        with pytest.raises(DataSourceConnectionException):
            catalog.run("avg_claim_by_car_type", {})

    def test_rejected_statement(
        self, data_source_configuration: DataSourceConfiguration
    ) -> None:
        broken = QueryTemplate(
            id="broken",
            category="testing",
            sql_text="SELECT policy_id FROM policies WHERE premium > {{premium}}",
            parameters=[{"name": "premium", "type": "number"}],
        )
        catalog = QueryCatalog(TemplateStore([broken]), QueryExecutor(data_source_configuration))
        with pytest.raises(QueryExecutionException) as exc_info:
            catalog.run("broken", {"premium": 100})
        assert "policies" in exc_info.value.engine_message

    @pytest.mark.parametrize(
        ("template_id", "parameters"),
        [
            ("repeat_claimants", {"min_claims": 2**70}),
            ("heavy_hitters", {"multiplier": -(2**70)}),
            ("clients_by_state", {"state": "\ud800"}),
        ],
    )
    def test_value_the_driver_cannot_bind(
        self, catalog: QueryCatalog, template_id: str, parameters: dict[str, object]
    ) -> None:
        with pytest.raises(QueryExecutionException) as exc_info:
            catalog.run(template_id, parameters)
        assert exc_info.value.engine_message

    def test_failure_is_logged(
        self, catalog: QueryCatalog, caplog: pytest.LogCaptureFixture
    ) -> None:
        with pytest.raises(TemplateNotFoundException):
            catalog.run("nonexistent_id", {})
        assert "nonexistent_id" in caplog.text
