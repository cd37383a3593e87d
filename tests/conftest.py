import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lumina.app.config import TestingConfig
from lumina.app.factory import create_app
from lumina.core.catalog import CatalogIndex
from lumina.core.models import Product


def make_product(pid, name, price, category="Apparel", description=""):
    return Product(
        id=pid,
        name=name,
        description=description or f"{name} description",
        category=category,
        price=price,
        image=f"https://img.example/{pid}.jpg",
        rating=4.0,
        reviews=10,
    )


@pytest.fixture()
def product_a():
    return make_product("A", "Product A", 10)


@pytest.fixture()
def product_b():
    return make_product("B", "Product B", 20)


@pytest.fixture()
def catalog():
    products = [
        make_product("p1", "Blue Jacket", 120, "Apparel", "Waterproof shell"),
        make_product("p2", "Red Scarf", 35, "Apparel", "Wool with soft blue trim"),
        make_product("p3", "Desk Lamp", 80, "Home", "Warm light for late nights"),
        make_product("p4", "Bluetooth Speaker", 59.5, "Tech", "Pocket sized"),
        make_product("p5", "Green Mug", 12, "Home", "Stoneware"),
    ]
    return CatalogIndex(products, ["Apparel", "Home", "Tech"])


@pytest.fixture()
def app():
    return create_app(TestingConfig)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client
