# src/ui/product_card.py

"""A single product tile in the feed grid."""

from rich.text import Text
from textual.widgets import Static

from src.models.product import EnrichedProduct


def render_card(item: EnrichedProduct) -> Text:
    """Build the rich text shown inside a product tile."""
    product = item.product
    text = Text()
    text.append(product.title, style="bold")
    text.append("  ")
    text.append(f" {product.condition.label} ", style="reverse")
    text.append("\n")

    if product.image_url:
        text.append(f"🖼  {product.image_url}\n", style="dim")
    else:
        text.append("📦 No image\n", style="dim")

    if product.description:
        text.append(f"{product.description}\n", style="italic")

    text.append(f"${product.price:.2f}", style="bold green")
    text.append(f"  by {item.seller_name}", style="dim")

    if product.category:
        text.append("\n")
        text.append(f"[{product.category}]", style="cyan")

    if product.is_sold:
        text.append("\nSOLD", style="bold red")
    return text


class ProductCard(Static):
    """Tile rendering one enriched product."""

    def __init__(self, item: EnrichedProduct) -> None:
        super().__init__(render_card(item), classes="product-card")
        self.item = item
