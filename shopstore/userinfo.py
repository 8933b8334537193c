"""User profile, address book, favourites, cart and orders."""

from __future__ import annotations

import configparser
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Mapping

from .models import CartProduct, Order, ProductInfo

_SECTION = "General"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass
class Address:
    """A delivery address."""

    receiver_name: str = ""
    phone_number: str = ""
    province: str = ""
    city: str = ""
    area: str = ""
    detail_address: str = ""
    is_default: bool = False

    def __str__(self) -> str:
        return (
            f"{self.province} {self.city} {self.area} {self.detail_address} "
            f"({self.receiver_name} 收) {self.phone_number}"
        )

    def to_json(self) -> dict:
        return {
            "receiverName": self.receiver_name,
            "phone_number": self.phone_number,
            "address": {
                "province": self.province,
                "city": self.city,
                "area": self.area,
                "detail_address": self.detail_address,
            },
            "default": self.is_default,
        }

    @classmethod
    def from_json(cls, data: Any) -> "Address":
        if not isinstance(data, Mapping):
            data = {}
        location = data.get("address")
        if not isinstance(location, Mapping):
            location = {}
        receiver = data.get("receiverName", data.get("receiver"))
        default = data.get("default")
        return cls(
            receiver_name=_text(receiver),
            phone_number=_text(data.get("phone_number")),
            province=_text(location.get("province")),
            city=_text(location.get("city")),
            area=_text(location.get("area")),
            detail_address=_text(location.get("detail_address")),
            is_default=default if isinstance(default, bool) else False,
        )


class AddressBook:
    """Ordered list of addresses."""

    def __init__(self, addresses=None) -> None:
        self._addresses: list[Address] = list(addresses or [])

    def add(self, address: Address) -> None:
        self._addresses.append(address)

    def remove(self, index: int) -> Address:
        """Remove the address at ``index`` and return it."""
        return self._addresses.pop(index)

    def __len__(self) -> int:
        return len(self._addresses)

    def __getitem__(self, index: int) -> Address:
        return self._addresses[index]

    def __iter__(self) -> Iterator[Address]:
        return iter(self._addresses)

    def to_json(self) -> list:
        return [address.to_json() for address in self._addresses]

    @classmethod
    def from_json(cls, data: Any) -> "AddressBook":
        """Build from a list or its JSON text; anything else gives an empty book."""
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8", errors="replace")
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except ValueError:
                data = None
        if not isinstance(data, list):
            return cls()
        return cls(Address.from_json(entry) for entry in data)


@dataclass
class UserInfoManager:
    """Holds the current user's data; profile fields persist to an INI file."""

    settings_path: Path
    account_number: str = ""
    user_name: str = ""
    portrait: str = ""
    addresses: AddressBook = field(default_factory=AddressBook)
    collected: list[ProductInfo] = field(default_factory=list)
    cart: list[CartProduct] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)

    def __init__(self, settings_path) -> None:
        self.settings_path = Path(settings_path)
        self.account_number = ""
        self.user_name = ""
        self.portrait = ""
        self.addresses = AddressBook()
        self.collected = []
        self.cart = []
        self.orders = []

    def _parser(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str
        return parser

    def load(self) -> None:
        """Read the profile and addresses; missing values become empty."""
        parser = self._parser()
        parser.read(self.settings_path, encoding="utf-8")
        section = parser[_SECTION] if parser.has_section(_SECTION) else {}
        self.account_number = section.get("userAccount", "")
        self.user_name = section.get("userName", "")
        self.portrait = section.get("portrait", "")
        self.addresses = AddressBook.from_json(section.get("address", ""))

    def save(self) -> None:
        parser = self._parser()
        parser.read(self.settings_path, encoding="utf-8")
        if not parser.has_section(_SECTION):
            parser.add_section(_SECTION)
        section = parser[_SECTION]
        section["userAccount"] = self.account_number
        section["userName"] = self.user_name
        section["portrait"] = self.portrait
        section["address"] = json.dumps(self.addresses.to_json(), ensure_ascii=False)
        with open(self.settings_path, "w", encoding="utf-8") as handle:
            parser.write(handle)

    def add_collected(self, product: ProductInfo) -> None:
        self.collected.append(product)

    def remove_collected(self, number: str) -> None:
        self.collected = [p for p in self.collected if p.number != number]

    def is_collected(self, number: str) -> bool:
        return any(p.number == number for p in self.collected)

    def add_cart_product(self, product: CartProduct) -> None:
        self.cart.append(product)

    def remove_cart_product(self, number: str) -> None:
        self.cart = [p for p in self.cart if p.product_number != number]

    def in_cart(self, number: str) -> bool:
        return any(p.product_number == number for p in self.cart)

    def add_order(self, order: Order) -> None:
        self.orders.append(order)

    def remove_order(self, number: str) -> None:
        self.orders = [o for o in self.orders if o.number != number]