from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from lumina.core.cart import CartStore
from lumina.core.catalog import CatalogIndex
from lumina.core.models import ALL_CATEGORIES, Product

logger = logging.getLogger(__name__)


class ViewController:
    """Transient storefront selections wired to the catalog and the cart.

    Holds the active category, the search text, the product shown in the
    detail overlay and whether the cart drawer is open. Derived views
    (``visible_products``, ``cart_total``, ``cart_count``) are computed on
    every read. The detail overlay and the cart drawer are independent.
    """

    def __init__(self, catalog: CatalogIndex, cart: Optional[CartStore] = None):
        self.catalog = catalog
        self.cart = cart if cart is not None else CartStore()
        self.active_category: str = ALL_CATEGORIES
        self.search_query: str = ""
        self.selected_product: Optional[Product] = None
        self.cart_drawer_open: bool = False

    # --- derived views ---
    @property
    def visible_products(self) -> List[Product]:
        return self.catalog.filter(self.active_category, self.search_query)

    @property
    def cart_total(self) -> float:
        return self.cart.total()

    @property
    def cart_count(self) -> int:
        return self.cart.count()

    @property
    def assistant_catalog(self) -> Tuple[Product, ...]:
        """Full catalog handed to the shopping assistant, never filtered or copied."""
        return self.catalog.products

    # --- filters ---
    def set_category(self, category: str) -> None:
        self.active_category = category

    def set_search(self, query: str) -> None:
        self.search_query = query

    def clear_filters(self) -> None:
        self.search_query, self.active_category = "", ALL_CATEGORIES

    # --- overlays ---
    def select_product(self, product_id: str) -> None:
        product = self.catalog.get(product_id)
        if product is not None:
            self.selected_product = product

    def close_detail(self) -> None:
        self.selected_product = None

    def open_cart(self) -> None:
        self.cart_drawer_open = True

    def close_cart(self) -> None:
        self.cart_drawer_open = False

    # --- cart commands ---
    def add_to_cart(self, product_id: str) -> None:
        product = self.catalog.get(product_id)
        if product is not None:
            self.cart.add(product)

    def remove_from_cart(self, product_id: str) -> None:
        self.cart.remove(product_id)

    def update_quantity(self, product_id: str, delta: int) -> None:
        self.cart.set_quantity(product_id, delta)

    def add_selected_to_bag(self) -> None:
        """Detail overlay "Add to Bag": add, close the overlay, show the cart."""
        if self.selected_product is None:
            return
        self.cart.add(self.selected_product)
        logger.debug("Added %s from detail view", self.selected_product.id)
        self.selected_product = None
        self.cart_drawer_open = True

    # --- session snapshot ---
    def snapshot(self) -> Dict[str, Any]:
        return {
            "category": self.active_category,
            "q": self.search_query,
            "selected": self.selected_product.id if self.selected_product else None,
            "cart_open": self.cart_drawer_open,
            "cart": self.cart.to_list(),
        }

    @classmethod
    def restore(cls, catalog: CatalogIndex, data: Optional[Dict[str, Any]]) -> "ViewController":
        data = data or {}
        view = cls(catalog, CartStore.from_list(data.get("cart")))
        view.active_category = data.get("category") or ALL_CATEGORIES
        view.search_query = data.get("q") or ""
        if data.get("selected"):
            view.select_product(data["selected"])
        view.cart_drawer_open = bool(data.get("cart_open"))
        return view
