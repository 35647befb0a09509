"""Unit tests for the read-only template store."""

import pytest
from pydantic import ValidationError

from claims_query_catalog.custom_exceptions import (
    ConfigurationValidationException,
    TemplateNotFoundException,
)
from claims_query_catalog.models import QueryTemplate
from claims_query_catalog.tools.template_store import TemplateStore


def _template(template_id: str, category: str) -> QueryTemplate:
    return QueryTemplate(
        id=template_id,
        category=category,
        description=f"{template_id} template",
        sql_text="SELECT 1",
    )


@pytest.fixture
def small_store() -> TemplateStore:
    return TemplateStore(
        [
            _template("b_first", "fraud_detection"),
            _template("a_second", "aggregation"),
            _template("c_third", "fraud_detection"),
        ]
    )


class TestGet:
    """get() returns stored templates and rejects unknown ids."""

    def test_round_trip_for_every_packaged_template(self, template_store: TemplateStore) -> None:
        for template in template_store.list():
            assert template_store.get(template.id) is template

    def test_unknown_id_raises_not_found(self, template_store: TemplateStore) -> None:
        with pytest.raises(TemplateNotFoundException) as exc_info:
            template_store.get("nonexistent_id")
        assert exc_info.value.template_id == "nonexistent_id"
        assert "nonexistent_id" in exc_info.value.message


class TestList:
    """list() is ordered, filtered and restartable."""

    def test_all_templates_in_insertion_order(self, small_store: TemplateStore) -> None:
        assert small_store.list().ids() == ["b_first", "a_second", "c_third"]

    def test_filtered_by_category(self, small_store: TemplateStore) -> None:
        assert small_store.list("fraud_detection").ids() == ["b_first", "c_third"]

    def test_unknown_category_is_empty(self, small_store: TemplateStore) -> None:
        listing = small_store.list("no_such_category")
        assert list(listing) == []
        assert len(listing) == 0

    def test_listing_can_be_iterated_twice(self, small_store: TemplateStore) -> None:
        listing = small_store.list("fraud_detection")
        assert [t.id for t in listing] == [t.id for t in listing]

    def test_packaged_fraud_detection_templates(self, template_store: TemplateStore) -> None:
        listing = template_store.list("fraud_detection")
        assert listing.ids() == [
            "heavy_hitters",
            "repeat_claimants",
            "claims_exceeding_car_value",
        ]
        assert all(template.category == "fraud_detection" for template in listing)


class TestStoreConstruction:
    """The store is built once and rejects duplicates."""

    def test_duplicate_id_rejected(self) -> None:
        with pytest.raises(ConfigurationValidationException):
            TemplateStore([_template("same", "a"), _template("same", "b")])

    def test_categories_in_first_appearance_order(self, small_store: TemplateStore) -> None:
        assert small_store.categories() == ["fraud_detection", "aggregation"]

    def test_len_and_contains(self, small_store: TemplateStore) -> None:
        assert len(small_store) == 3
        assert "a_second" in small_store
        assert "missing" not in small_store

    def test_templates_are_immutable(self, small_store: TemplateStore) -> None:
        template = small_store.get("a_second")
        with pytest.raises(ValidationError):
            template.sql_text = "DROP TABLE claims"  # type: ignore[misc]
