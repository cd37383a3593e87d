from flask import Flask

from lumina.modules.catalog.routes import bp as catalog_bp
from lumina.modules.cart.routes import bp as cart_bp
from lumina.modules.view.routes import bp as view_bp
from lumina.modules.assistant.routes import bp as assistant_bp


def register_api_blueprints(app: Flask) -> None:
    app.register_blueprint(catalog_bp, url_prefix="/api")
    app.register_blueprint(cart_bp, url_prefix="/api")
    app.register_blueprint(view_bp, url_prefix="/api")
    app.register_blueprint(assistant_bp, url_prefix="/api")

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "Lumina Storefront API",
            "version": "0.1.0",
            "endpoints": {
                "catalog": ["/categories", "/products", "/products/<id>"],
                "cart": ["/cart", "/cart/add", "/cart/quantity", "/cart/remove"],
                "view": [
                    "/view",
                    "/view/filters",
                    "/view/filters/clear",
                    "/view/detail",
                    "/view/detail/add-to-bag",
                    "/view/cart-drawer",
                ],
                "assistant": ["/assistant/catalog"],
            },
        }, 200
