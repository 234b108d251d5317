# src/services/feed_loader.py

"""Loads the unsold product feed and resolves each seller's profile."""

import logging

from src.models.product import EnrichedProduct, Product, SellerProfile
from src.services.remote_client import FetchError, RemoteDataClient

logger = logging.getLogger("quicksell.feed")


class FeedLoader:
    """Fetch unsold products and merge them with their seller profiles.

    Profiles are resolved with a single batched lookup over the distinct
    seller ids of the page.  A failing product query aborts the load with
    :class:`FetchError`; a failing profile lookup only degrades every
    seller to the anonymous label.
    """

    def __init__(self, client: RemoteDataClient) -> None:
        self.client = client

    @staticmethod
    def _parse_rows(rows: list[dict[str, object]]) -> list[Product]:
        products: list[Product] = []
        for row in rows:
            try:
                product = Product.from_row(row)
            except (KeyError, TypeError, ValueError) as exc:
                raise FetchError(
                    f"Malformed product row: {exc}"
                ) from exc
            if product.is_sold:
                logger.debug("Skipping sold product %s", product.id)
                continue
            products.append(product)
        return products

    async def _resolve_profiles(
        self, seller_ids: list[str],
    ) -> dict[str, SellerProfile]:
        try:
            return await self.client.get_profiles(seller_ids)
        except (FetchError, KeyError) as exc:
            logger.warning(
                "Profile lookup for %d sellers failed, "
                "showing anonymous sellers: %s",
                len(seller_ids),
                exc,
            )
            return {}

    async def load(self) -> list[EnrichedProduct]:
        """Return the enriched unsold feed, newest first."""
        rows = await self.client.list_unsold_products()
        products = self._parse_rows(rows)

        # dict.fromkeys keeps first-seen order while dropping repeats
        seller_ids = list(dict.fromkeys(p.seller_id for p in products))
        profiles = await self._resolve_profiles(seller_ids)

        enriched = [
            EnrichedProduct(product=p, seller=profiles.get(p.seller_id))
            for p in products
        ]
        logger.info(
            "Loaded %d products from %d sellers (%d profiles found)",
            len(enriched),
            len(seller_ids),
            len(profiles),
        )
        return enriched
