from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from lumina.core.models import CartItem, Product


class CartStore:
    """Ordered cart, unique by product id.

    Items keep the position of their first add. Quantities never drop below 1
    while an item is present; only ``remove`` takes an item out. Commands on
    unknown ids are no-ops.
    """

    def __init__(self, items: Iterable[CartItem] = ()):
        self._items: List[CartItem] = []
        for item in items:
            if self.get(item.id) is None:
                self._items.append(item)

    @property
    def items(self) -> Tuple[CartItem, ...]:
        return tuple(self._items)

    def get(self, product_id: str) -> Optional[CartItem]:
        for item in self._items:
            if item.id == product_id:
                return item
        return None

    def add(self, product: Product) -> None:
        item = self.get(product.id)
        if item:
            item.quantity += 1
        else:
            self._items.append(CartItem.from_product(product))

    def remove(self, product_id: str) -> None:
        self._items = [i for i in self._items if i.id != product_id]

    def set_quantity(self, product_id: str, delta: int) -> None:
        item = self.get(product_id)
        if item:
            item.quantity = max(1, item.quantity + delta)

    def total(self) -> float:
        return sum(i.price * i.quantity for i in self._items)

    def count(self) -> int:
        return sum(i.quantity for i in self._items)

    # --- session snapshot ---
    def to_list(self) -> List[Dict[str, Any]]:
        return [i.to_dict() for i in self._items]

    @classmethod
    def from_list(cls, data: Iterable[Dict[str, Any]] | None) -> "CartStore":
        return cls(CartItem.from_dict(d) for d in (data or []))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, product_id: object) -> bool:
        return any(i.id == product_id for i in self._items)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(tuple(self._items))
