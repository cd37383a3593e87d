from __future__ import annotations

import logging
from flask import Blueprint

from lumina.app.common.formatting import money
from lumina.app.common.storefront import get_product_or_404, load_view, save_view
from lumina.app.common.validation import get_json, require_fields, require_int, require_str
from lumina.core.view import ViewController

bp = Blueprint("cart", __name__)
logger = logging.getLogger(__name__)


def cart_response(view: ViewController) -> dict:
    total = view.cart_total
    return {
        "items": [
            {
                **i.to_dict(),
                "line_total": i.line_total,
                "line_total_display": money(i.line_total),
            }
            for i in view.cart
        ],
        "total": total,
        "total_display": money(total),
        "count": view.cart_count,
    }


@bp.get("/cart")
def get_cart():
    return cart_response(load_view()), 200


@bp.post("/cart/add")
def add_to_cart():
    data = get_json()
    require_fields(data, ["product_id"])
    product_id = require_str(data, "product_id")
    get_product_or_404(product_id)

    view = load_view()
    view.add_to_cart(product_id)
    save_view(view)
    logger.info("cart add product=%s count=%d", product_id, view.cart_count)
    return cart_response(view), 201


@bp.patch("/cart/quantity")
def update_quantity():
    """Apply a signed delta; the quantity never drops below 1."""
    data = get_json()
    require_fields(data, ["product_id", "delta"])
    product_id = require_str(data, "product_id")
    delta = require_int(data, "delta")

    view = load_view()
    view.update_quantity(product_id, delta)
    save_view(view)
    return cart_response(view), 200


@bp.delete("/cart/remove")
def remove_cart_item():
    data = get_json()
    require_fields(data, ["product_id"])
    product_id = require_str(data, "product_id")

    view = load_view()
    view.remove_from_cart(product_id)
    save_view(view)
    return cart_response(view), 200
