"""Catalog feed for the external shopping assistant widget."""

from flask import Blueprint

from lumina.app.common.storefront import current_catalog
from lumina.modules.catalog.routes import product_dict

bp = Blueprint("assistant", __name__)


@bp.get("/assistant/catalog")
def assistant_catalog():
    # Always the full catalog; the shopper's session is not read
    products = current_catalog().products
    return {"items": [product_dict(p) for p in products], "count": len(products)}, 200
