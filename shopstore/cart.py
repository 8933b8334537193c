"""Shopping cart lines and the running total of checked lines."""

from __future__ import annotations

from typing import Callable, Optional

from .models import CartProduct
from .userinfo import UserInfoManager


def _to_float(text: str) -> float:
    try:
        return float(text)
    except (TypeError, ValueError):
        return 0.0


class CartLine:
    """One product in the cart with its quantity and check state."""

    def __init__(
        self,
        product: CartProduct,
        on_change: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.product = product
        self.on_change = on_change
        self.quantity = 1
        self.checked = False

    @property
    def number(self) -> str:
        return self.product.product_number

    @property
    def unit_price(self) -> float:
        return _to_float(self.product.price)

    def subtotal(self) -> float:
        return self.unit_price * self.quantity

    def _emit(self, delta: float) -> None:
        if self.on_change is not None:
            self.on_change(delta)

    def _change_quantity(self, quantity: int) -> int:
        old_sum = int(self.unit_price * self.quantity)
        self.quantity = quantity
        if self.checked:
            self._emit(self.subtotal() - old_sum)
        return self.quantity

    def increase(self) -> int:
        return self._change_quantity(self.quantity + 1)

    def decrease(self) -> int:
        return self._change_quantity(self.quantity if self.quantity == 1 else self.quantity - 1)

    def set_checked(self, checked: bool) -> None:
        """Check or uncheck; a change adds or takes the subtotal off the total."""
        checked = bool(checked)
        if checked == self.checked:
            return
        self.checked = checked
        self._emit(self.subtotal() if checked else -self.subtotal())


class ShoppingCart:
    """The user's cart with the sum of checked lines."""

    def __init__(self, manager: UserInfoManager) -> None:
        self.manager = manager
        self._sum = 0.0
        self.lines: list[CartLine] = [
            CartLine(product, self._update_sum) for product in manager.cart
        ]

    def _update_sum(self, delta: float) -> None:
        self._sum += delta
        if self._sum < 0:
            self._sum = 0.0

    def total(self) -> float:
        return self._sum

    def remove(self, number: str) -> None:
        """Drop a line from the cart and the user's data; its subtotal leaves the total."""
        for line in self.lines:
            if line.number == number:
                self.lines.remove(line)
                self.manager.remove_cart_product(number)
                self._update_sum(-line.subtotal())
                return
        raise KeyError(number)

    def set_all_checked(self, checked: bool) -> None:
        for line in self.lines:
            line.set_checked(checked)