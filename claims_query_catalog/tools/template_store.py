from __future__ import annotations

from collections.abc import Iterable, Iterator
from claims_query_catalog.custom_exceptions.catalog_exceptions import (
    TemplateNotFoundException,
)
from claims_query_catalog.custom_exceptions.configuration_exceptions import (
    ConfigurationValidationException,
)
from claims_query_catalog.models.catalog_models import QueryTemplate


class TemplateListing:
    """
    Restartable view over the templates of a store.

    Each iteration walks the store again in insertion order, so the listing
    can be iterated any number of times.
    """

    def __init__(self, templates: tuple[QueryTemplate, ...], category: str | None) -> None:
        self._templates = templates
        self.category = category

    def __iter__(self) -> Iterator[QueryTemplate]:
        for template in self._templates:
            if self.category is None or template.category == self.category:
                yield template

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def ids(self) -> list[str]:
        return [template.id for template in self]


class TemplateStore:
    """
    Read-only collection of query templates keyed by id.

    The store is filled once at construction and never changes afterwards,
    so any number of callers may read it at the same time.
    """

    def __init__(self, templates: Iterable[QueryTemplate]) -> None:
        """
        Build the store.

        Params:
            templates (Iterable[QueryTemplate]): Templates in the order they were declared.

        Raises:
            ConfigurationValidationException: If two templates share an id.
        """
        by_id: dict[str, QueryTemplate] = {}
        for template in templates:
            if template.id in by_id:
                raise ConfigurationValidationException(
                    f"Duplicate template id: '{template.id}'", template_id=template.id
                )
            by_id[template.id] = template
        self._by_id = by_id
        self._templates = tuple(by_id.values())

    def get(self, template_id: str) -> QueryTemplate:
        """
        Get a template by id.

        Params:
            template_id (str): The template id.

        Returns:
            QueryTemplate: The stored template.

        Raises:
            TemplateNotFoundException: If no template has that id.
        """
        try:
            return self._by_id[template_id]
        except KeyError:
            raise TemplateNotFoundException(template_id) from None

    def list(self, category: str | None = None) -> TemplateListing:
        """
        List templates in insertion order, optionally restricted to one category.

        Params:
            category (str | None): Category to filter on; all templates when None.

        Returns:
            TemplateListing: Lazy, restartable listing. Empty for an unknown category.
        """
        return TemplateListing(self._templates, category)

    def categories(self) -> list[str]:
        """Distinct categories in order of first appearance."""
        return [*dict.fromkeys(template.category for template in self._templates)]

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._by_id
