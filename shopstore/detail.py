"""Product detail page: variant choice, quantity, purchase, cart and favourites."""

from __future__ import annotations

import random
from datetime import datetime
from typing import Optional, Union

from .models import CartProduct, ClassificationOption, Order, ProductInfo
from .userinfo import Address, UserInfoManager

NO_STOCK = "没有更多库存"
ADDRESS_REQUIRED = "请先选择地址"
ALREADY_IN_CART = "已在购物车中"

_ORDER_SUFFIX_LOW = 10000
_ORDER_SUFFIX_HIGH = 999999


class OutOfStockError(Exception):
    """The requested quantity exceeds the variant's stock."""


class AddressRequiredError(Exception):
    """The action needs a delivery address first."""


class AlreadyInCartError(Exception):
    """The product is already in the shopping cart."""


def _to_float(text: str) -> float:
    try:
        return float(text)
    except (TypeError, ValueError):
        return 0.0


def _format_number(value: float) -> str:
    return f"{value:.6g}"


def make_order_number(now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> str:
    """Order number: the time as hhmmss followed by a random number in [10000, 999999)."""
    now = now or datetime.now()
    rng = rng or random.Random()
    suffix = rng.randrange(_ORDER_SUFFIX_LOW, _ORDER_SUFFIX_HIGH)
    return now.strftime("%H%M%S") + str(suffix)


class ProductDetail:
    """State of one product's detail page, acting on the user's data."""

    def __init__(self, product: ProductInfo, manager: UserInfoManager) -> None:
        self.product = product
        self.manager = manager
        self.options: list[ClassificationOption] = product.options()
        if not self.options:
            raise ValueError(f"product {product.number!r} has no classification")
        self.current: ClassificationOption = self.options[0]
        self.price: str = self.current.price
        self.quantity: int = 1
        self.address: str = ""
        self.cover_picture: str = product.cover_image()
        self.collected: bool = manager.is_collected(product.number)

    def select_option(self, explain: str) -> ClassificationOption:
        """Switch to the variant with this description and reset the quantity to 1."""
        for option in self.options:
            if option.explain == explain:
                self.current = option
                self.price = option.price
                self.quantity = 1
                return option
        raise KeyError(explain)

    def increase(self) -> int:
        if self.quantity + 1 > self.current.quantity:
            raise OutOfStockError(NO_STOCK)
        self.quantity += 1
        return self.quantity

    def decrease(self) -> int:
        if self.quantity - 1 >= 1:
            self.quantity -= 1
        return self.quantity

    def set_address(self, address: Union[Address, str]) -> str:
        """Choose the delivery address.

        An ``Address`` without a receiver name or phone number is ignored.
        """
        if isinstance(address, Address):
            if not address.receiver_name or not address.phone_number:
                return self.address
            self.address = str(address)
        else:
            self.address = str(address)
        return self.address

    def _require_address(self) -> None:
        if not self.address:
            raise AddressRequiredError(ADDRESS_REQUIRED)

    def buy(self, now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> Order:
        """Record an order for the current variant and quantity."""
        self._require_address()
        now = now or datetime.now()
        order = Order(
            number=make_order_number(now, rng),
            time=now.strftime("%Y-%m-%d"),
            total_price=_format_number(_to_float(self.price) * self.quantity),
            product_number=self.product.number,
            product_title=self.product.title,
            cover_picture=self.cover_picture,
        )
        self.manager.add_order(order)
        return order

    def add_to_cart(self) -> CartProduct:
        self._require_address()
        item = CartProduct(
            product_number=self.product.number,
            title=self.product.title,
            quantity=self.quantity,
            price=self.price,
            cover_picture=self.cover_picture,
        )
        if self.manager.in_cart(item.product_number):
            raise AlreadyInCartError(ALREADY_IN_CART)
        self.manager.add_cart_product(item)
        return item

    def toggle_collect(self) -> bool:
        """Add to or remove from favourites; return whether it is now collected."""
        self._require_address()
        if self.manager.is_collected(self.product.number):
            self.manager.remove_collected(self.product.number)
            self.collected = False
        else:
            self.manager.add_collected(self.product)
            self.collected = True
        return self.collected