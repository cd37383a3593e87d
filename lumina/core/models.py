from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

# Sentinel category meaning "no category filter".
ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    description: str
    category: str
    price: float
    image: str
    rating: float = 0.0
    reviews: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CartItem:
    """Snapshot of a product taken when it was first added, plus a quantity."""

    id: str
    name: str
    description: str
    category: str
    price: float
    image: str
    rating: float = 0.0
    reviews: int = 0
    quantity: int = 1

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "CartItem":
        return cls(quantity=quantity, **asdict(product))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartItem":
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
