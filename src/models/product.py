# src/models/product.py

"""Marketplace listing models shared by the client, loader and UI."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from src.config.settings import Settings


class Condition(str, Enum):
    """Condition of a listed item, as stored in the ``condition`` column."""

    NEW = "new"
    LIKE_NEW = "like-new"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``Like New``."""
        return self.value.replace("-", " ").title()


@dataclass
class Product:
    """A single listing row from the ``products`` table."""

    id: str
    title: str
    price: float
    seller_id: str
    created_at: datetime
    description: str | None = None
    image_url: str | None = None
    category: str | None = None
    condition: Condition = Condition.NEW
    is_sold: bool = False

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Product":
        """Build a Product from a backend row.

        Raises ``KeyError``/``ValueError`` when required columns are
        missing or malformed, the title is blank or the price is negative.
        """
        title = str(row["title"])
        if not title.strip():
            raise ValueError(f"Product {row['id']} has a blank title")
        price = float(row["price"])
        if not math.isfinite(price) or price < 0:
            raise ValueError(f"Product {row['id']} has invalid price {price}")
        return cls(
            id=str(row["id"]),
            title=title,
            price=price,
            seller_id=str(row["seller_id"]),
            created_at=datetime.fromisoformat(str(row["created_at"])),
            description=row.get("description"),
            image_url=row.get("image_url") or None,
            category=row.get("category") or None,
            condition=Condition(row.get("condition") or "new"),
            is_sold=bool(row.get("is_sold", False)),
        )


@dataclass
class SellerProfile:
    """Read-only projection of a row in the ``profiles`` table."""

    id: str
    username: str | None = None
    full_name: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "SellerProfile":
        """Build a SellerProfile from a backend row."""
        return cls(
            id=str(row["id"]),
            username=row.get("username"),
            full_name=row.get("full_name"),
        )

    @property
    def display_name(self) -> str | None:
        """Full name, falling back to username; None when both are blank."""
        return self.full_name or self.username or None


@dataclass
class EnrichedProduct:
    """A Product merged with its seller's profile for rendering."""

    product: Product
    seller: SellerProfile | None = None

    @property
    def seller_name(self) -> str:
        if self.seller is None:
            return Settings.ANONYMOUS_SELLER
        return self.seller.display_name or Settings.ANONYMOUS_SELLER
