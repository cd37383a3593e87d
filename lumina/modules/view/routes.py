from __future__ import annotations

from flask import Blueprint

from lumina.app.common.errors import validation_error
from lumina.app.common.storefront import get_product_or_404, load_view, save_view
from lumina.app.common.validation import get_json, require_fields, require_str
from lumina.core.view import ViewController
from lumina.modules.cart.routes import cart_response
from lumina.modules.catalog.routes import product_dict

bp = Blueprint("view", __name__)


def view_response(view: ViewController) -> dict:
    visible = view.visible_products
    return {
        "active_category": view.active_category,
        "search_query": view.search_query,
        "categories": list(view.catalog.categories),
        "visible_products": [product_dict(p) for p in visible],
        "visible_count": len(visible),
        "selected_product": product_dict(view.selected_product) if view.selected_product else None,
        "cart_drawer_open": view.cart_drawer_open,
        "cart": cart_response(view),
    }


def _commit(view: ViewController):
    save_view(view)
    return view_response(view), 200


@bp.get("/view")
def get_view():
    return view_response(load_view()), 200


@bp.put("/view/filters")
def set_filters():
    """Body: ``{"category": "...", "q": "..."}``; either key may be omitted."""
    data = get_json()
    view = load_view()

    if "category" in data:
        category = data["category"]
        if not isinstance(category, str) or not view.catalog.has_category(category):
            validation_error("Unknown category", category=category)
        view.set_category(category)

    if "q" in data:
        if not isinstance(data["q"], str):
            validation_error("q must be a string", field="q")
        view.set_search(data["q"])

    return _commit(view)


@bp.post("/view/filters/clear")
def clear_filters():
    view = load_view()
    view.clear_filters()
    return _commit(view)


@bp.post("/view/detail")
def open_detail():
    data = get_json()
    require_fields(data, ["product_id"])
    product_id = require_str(data, "product_id")
    get_product_or_404(product_id)

    view = load_view()
    view.select_product(product_id)
    return _commit(view)


@bp.delete("/view/detail")
def close_detail():
    view = load_view()
    view.close_detail()
    return _commit(view)


@bp.post("/view/detail/add-to-bag")
def add_selected_to_bag():
    view = load_view()
    view.add_selected_to_bag()
    return _commit(view)


@bp.post("/view/cart-drawer")
def open_cart_drawer():
    view = load_view()
    view.open_cart()
    return _commit(view)


@bp.delete("/view/cart-drawer")
def close_cart_drawer():
    view = load_view()
    view.close_cart()
    return _commit(view)
