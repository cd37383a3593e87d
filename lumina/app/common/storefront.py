"""Per-browser storefront state kept in the Flask session.

Each request rebuilds a ViewController from the session snapshot, applies
one command and writes the snapshot back. Concurrent requests with the same
cookie are not merged; whichever response the browser stores last wins.
"""

from __future__ import annotations

from flask import current_app, session

from lumina.app.extensions import CATALOG_KEY
from lumina.app.common.errors import not_found
from lumina.core.catalog import CatalogIndex
from lumina.core.models import Product
from lumina.core.view import ViewController

SESSION_KEY = "storefront"


def current_catalog() -> CatalogIndex:
    return current_app.extensions[CATALOG_KEY]


def load_view() -> ViewController:
    return ViewController.restore(current_catalog(), session.get(SESSION_KEY))


def save_view(view: ViewController) -> None:
    session[SESSION_KEY] = view.snapshot()


def get_product_or_404(product_id: str) -> Product:
    product = current_catalog().get(product_id)
    if product is None:
        not_found("Product not found", product_id=product_id)
    return product
