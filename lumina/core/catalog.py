from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from lumina.core.models import ALL_CATEGORIES, Product

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """The supplied catalog breaks its contract (raised at load time only)."""


def filter_products(products: Sequence[Product], category: str, query: str) -> List[Product]:
    """Return the products matching both the category and the search text.

    ``category == "All"`` disables the category check and an empty ``query``
    disables the text check. Text matching is a case-insensitive substring
    test against the name or the description. Input order is kept.
    """
    needle = query.lower()
    return [
        p
        for p in products
        if (category == ALL_CATEGORIES or p.category == category)
        and (not needle or needle in p.name.lower() or needle in p.description.lower())
    ]


class CatalogIndex:
    """Read-only product list plus the category labels shown in the category bar."""

    def __init__(self, products: Iterable[Product], categories: Iterable[str]):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id = {}
        for p in self._products:
            if p.id in self._by_id:
                raise CatalogError(f"Duplicate product id: {p.id}")
            self._by_id[p.id] = p

        cats = [c for c in categories if c != ALL_CATEGORIES]
        self._categories: Tuple[str, ...] = (ALL_CATEGORIES, *dict.fromkeys(cats))
        logger.info("Catalog loaded: %d products, %d categories", len(self._products), len(cats))

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._categories

    def has_category(self, category: str) -> bool:
        return category in self._categories

    def get(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def filter(self, category: str = ALL_CATEGORIES, query: str = "") -> List[Product]:
        return filter_products(self._products, category, query)

    def __len__(self) -> int:
        return len(self._products)
