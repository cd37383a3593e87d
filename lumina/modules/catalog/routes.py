from __future__ import annotations

from flask import Blueprint, request

from lumina.app.common.errors import validation_error
from lumina.app.common.formatting import money
from lumina.app.common.storefront import current_catalog, get_product_or_404
from lumina.core.models import ALL_CATEGORIES, Product

bp = Blueprint("catalog", __name__)


def product_dict(p: Product) -> dict:
    data = p.to_dict()
    data["price_display"] = money(p.price)
    return data


@bp.get("/categories")
def list_categories():
    """GET /api/categories - Category bar entries, "All" first."""
    return {"items": list(current_catalog().categories)}, 200


@bp.get("/products")
def list_products():
    """GET /api/products - Filter the catalog without touching session state.

    Query params:
      - category: a catalog category or "All" (default)
      - q: case-insensitive text matched against name and description
    """
    catalog = current_catalog()
    category = request.args.get("category") or ALL_CATEGORIES
    query = request.args.get("q", "")
    if not catalog.has_category(category):
        validation_error("Unknown category", category=category)

    items = catalog.filter(category, query)
    return {
        "items": [product_dict(p) for p in items],
        "count": len(items),
    }, 200


@bp.get("/products/<product_id>")
def get_product(product_id: str):
    """GET /api/products/<id> - Product details for the detail overlay."""
    return product_dict(get_product_or_404(product_id)), 200
