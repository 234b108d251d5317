# src/models/feed_state.py

"""View-model for the product feed screen."""

from dataclasses import dataclass, field

from src.filters.search_filter import SearchFilter
from src.models.product import EnrichedProduct


@dataclass
class FeedState:
    """Full feed plus the state needed to derive what is displayed.

    ``products`` is written only by the feed loader; ``displayed`` is
    always recomputed from ``(products, query)``.
    """

    products: list[EnrichedProduct] = field(
        default_factory=lambda: list[EnrichedProduct]()
    )
    query: str = ""
    loading: bool = False
    loaded: bool = False
    error: str | None = None

    @property
    def displayed(self) -> list[EnrichedProduct]:
        """The search-filtered feed, in server order."""
        return SearchFilter.apply(self.products, self.query)

    def load_succeeded(self, products: list[EnrichedProduct]) -> None:
        """Replace the full feed with a fresh load."""
        self.products = list(products)
        self.loaded = True
        self.loading = False
        self.error = None

    def load_failed(self, message: str) -> None:
        """Record a failed load; the previous feed is left as it was."""
        self.loading = False
        self.error = message

    @property
    def summary(self) -> str:
        count = len(self.displayed)
        noun = "item" if count == 1 else "items"
        return f"{count} {noun} available"

    def empty_message(self) -> tuple[str, str] | None:
        """Heading and hint for an empty feed, or None when items show."""
        if self.displayed:
            return None
        if not self.loaded and self.error is not None:
            return ("Could not load products", self.error)
        if self.query:
            return (
                "No products found",
                "Try adjusting your search terms",
            )
        return (
            "No products available",
            "Be the first to list an item for sale!",
        )
