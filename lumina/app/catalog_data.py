from __future__ import annotations

import csv
import math
import logging
from pathlib import Path
from typing import List, Tuple

from lumina.core.catalog import CatalogError, CatalogIndex
from lumina.core.models import Product

logger = logging.getLogger(__name__)

CATEGORIES = ["Tech", "Apparel", "Home", "Accessories"]

PRODUCTS = [
    Product(
        id="1",
        name="Aura Wireless Headphones",
        description="Noise-cancelling over-ear headphones with a 40-hour battery.",
        category="Tech",
        price=299.0,
        image="https://picsum.photos/seed/headphones/600/800",
        rating=4.8,
        reviews=124,
    ),
    Product(
        id="2",
        name="Minimalist Leather Watch",
        description="Swiss movement in a brushed steel case with an Italian leather strap.",
        category="Accessories",
        price=189.0,
        image="https://picsum.photos/seed/watch/600/800",
        rating=4.6,
        reviews=89,
    ),
    Product(
        id="3",
        name="Merino Wool Overshirt",
        description="Heavyweight overshirt knitted from soft merino with horn buttons.",
        category="Apparel",
        price=145.0,
        image="https://picsum.photos/seed/overshirt/600/800",
        rating=4.5,
        reviews=56,
    ),
    Product(
        id="4",
        name="Ceramic Pour-Over Set",
        description="Hand-glazed dripper and carafe for slow morning coffee.",
        category="Home",
        price=68.0,
        image="https://picsum.photos/seed/pourover/600/800",
        rating=4.9,
        reviews=212,
    ),
    Product(
        id="5",
        name="Smart Desk Lamp",
        description="Adjustable colour temperature with a wireless charging base.",
        category="Tech",
        price=129.0,
        image="https://picsum.photos/seed/lamp/600/800",
        rating=4.4,
        reviews=73,
    ),
    Product(
        id="6",
        name="Linen Throw Blanket",
        description="Stonewashed linen throw in a soft blue with fringed edges.",
        category="Home",
        price=95.0,
        image="https://picsum.photos/seed/throw/600/800",
        rating=4.7,
        reviews=41,
    ),
    Product(
        id="7",
        name="Canvas Weekender Bag",
        description="Waxed canvas holdall with leather handles and a shoe pocket.",
        category="Accessories",
        price=220.0,
        image="https://picsum.photos/seed/weekender/600/800",
        rating=4.6,
        reviews=98,
    ),
    Product(
        id="8",
        name="Organic Cotton Tee",
        description="Relaxed fit heavyweight tee, garment dyed.",
        category="Apparel",
        price=45.0,
        image="https://picsum.photos/seed/tee/600/800",
        rating=4.3,
        reviews=310,
    ),
]


def read_catalog_csv(path: Path) -> Tuple[List[Product], List[str]]:
    """Read ``id,name,description,category,price,image,rating,reviews`` rows.

    Categories come back in first-seen order.
    """
    products: List[Product] = []
    categories: List[str] = []

    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        for line_no, row in enumerate(reader, start=2):
            pid = (row.get("id") or "").strip()
            name = (row.get("name") or "").strip()
            if not pid or not name:
                raise CatalogError(f"{path}:{line_no}: id and name are required")

            category = (row.get("category") or "").strip() or "General"
            if category not in categories:
                categories.append(category)

            try:
                price = float((row.get("price") or "").strip())
                rating = float(row.get("rating") or 0)
                reviews = int(row.get("reviews") or 0)
            except ValueError as e:
                raise CatalogError(f"{path}:{line_no}: {e}") from e

            if not math.isfinite(price) or price <= 0:
                raise CatalogError(f"{path}:{line_no}: price must be a positive number")
            if not 0 <= rating <= 5:
                raise CatalogError(f"{path}:{line_no}: rating must be between 0 and 5")
            if reviews < 0:
                raise CatalogError(f"{path}:{line_no}: reviews must be >= 0")

            products.append(
                Product(
                    id=pid,
                    name=name,
                    description=(row.get("description") or "").strip(),
                    category=category,
                    price=price,
                    image=(row.get("image") or "").strip(),
                    rating=rating,
                    reviews=reviews,
                )
            )

    return products, categories


def build_catalog(csv_path: str | None = None) -> CatalogIndex:
    if csv_path:
        path = Path(csv_path)
        if not path.exists():
            raise CatalogError(f"Catalog file not found: {path}")
        logger.info("Loading catalog from CSV: %s", path)
        products, categories = read_catalog_csv(path)
        return CatalogIndex(products, categories)
    return CatalogIndex(PRODUCTS, CATEGORIES)
