"""Product, cart and order records shared across the store."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping


class ProductKind(IntEnum):
    """Product category as stored in the ``kind`` column."""

    UNKNOWN = 0
    BEAUTY_MAKEUP = 1
    CLOTHING = 2
    DIGITAL_EQUIPMENT = 3
    FOODSTUFF = 4
    FURNITURE = 5
    HOME_APPLIANCES = 6


def _parse_json(raw: Any) -> Any:
    """Decode JSON text or bytes; already decoded values pass through."""
    if raw is None:
        return None
    if isinstance(raw, (list, dict)):
        return raw
    if isinstance(raw, (bytes, bytearray, memoryview)):
        raw = bytes(raw).decode("utf-8", errors="replace")
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return None


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


@dataclass
class ClassificationOption:
    """One purchasable variant of a product."""

    explain: str = ""
    price: str = ""
    quantity: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "ClassificationOption":
        if not isinstance(data, Mapping):
            data = {}
        return cls(
            explain=_as_str(data.get("explain")),
            price=_as_str(data.get("price")),
            quantity=_as_int(data.get("quantity")),
        )


@dataclass
class ProductInfo:
    """A product as loaded from the catalogue."""

    number: str = ""
    kind: ProductKind = ProductKind.UNKNOWN
    title: str = ""
    description: dict = field(default_factory=dict)
    classification: list = field(default_factory=list)
    image: list = field(default_factory=list)
    description_image: list = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ProductInfo":
        """Build a product from a database row mapping column names to values."""
        raw_number = record.get("product_number")
        number = "" if raw_number is None else str(raw_number)
        try:
            kind = ProductKind(int(record.get("kind") or 0))
        except (TypeError, ValueError):
            kind = ProductKind.UNKNOWN
        raw_title = record.get("title")
        title = "" if raw_title is None else str(raw_title)

        description = _parse_json(record.get("description"))
        classification = _parse_json(record.get("classification"))
        image = _parse_json(record.get("image"))
        description_image = _parse_json(record.get("description_image"))

        return cls(
            number=number,
            kind=kind,
            title=title,
            description=description if isinstance(description, dict) else {},
            classification=classification if isinstance(classification, list) else [],
            image=image if isinstance(image, list) else [],
            description_image=(
                description_image if isinstance(description_image, list) else []
            ),
        )

    def cover_image(self) -> str:
        """Relative path of the first product image, or an empty string."""
        return _as_str(self.image[0]) if self.image else ""

    def base_price(self) -> str:
        """Price of the first variant, or an empty string."""
        options = self.options()
        return options[0].price if options else ""

    def options(self) -> list[ClassificationOption]:
        return [ClassificationOption.from_json(entry) for entry in self.classification]


@dataclass
class CartProduct:
    """A product placed in the shopping cart."""

    product_number: str
    title: str
    quantity: int
    price: str
    cover_picture: str = ""


@dataclass
class Order:
    """A completed purchase."""

    number: str
    time: str
    total_price: str
    product_number: str
    product_title: str
    cover_picture: str = ""