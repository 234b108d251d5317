# src/filters/search_filter.py

"""Live text search over the loaded product feed."""

import logging

from src.models.product import EnrichedProduct

logger = logging.getLogger("quicksell.filters")


class SearchFilter:
    """Derive the displayed feed from the full feed and a search query."""

    @staticmethod
    def matches(item: EnrichedProduct, query: str) -> bool:
        """Case-insensitive substring match on title, description or category."""
        needle = query.lower()
        product = item.product
        if needle in product.title.lower():
            return True
        if product.description and needle in product.description.lower():
            return True
        return bool(
            product.category and needle in product.category.lower()
        )

    @staticmethod
    def apply(
        products: list[EnrichedProduct],
        query: str,
    ) -> list[EnrichedProduct]:
        """Return the items matching *query*, in feed order.

        An empty or whitespace-only query returns the full feed unchanged.
        """
        if not query.strip():
            return list(products)

        kept = [p for p in products if SearchFilter.matches(p, query)]
        logger.debug(
            "Search '%s' matched %d of %d products",
            query,
            len(kept),
            len(products),
        )
        return kept
