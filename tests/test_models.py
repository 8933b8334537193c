import json

import pytest

from shopstore.models import (
    CartProduct,
    ClassificationOption,
    Order,
    ProductInfo,
    ProductKind,
)


def _record(**overrides):
    record = {
        "product_number": "P1",
        "kind": 3,
        "title": "Camera",
        "description": json.dumps({"brand": "Acme"}),
        "classification": json.dumps(
            [
                {"explain": "black", "price": "99.5", "quantity": 4},
                {"explain": "white", "price": "120", "quantity": 1},
            ]
        ),
        "image": json.dumps(["/img/a.jpg", "/img/b.jpg"]),
        "description_image": json.dumps(["/img/d.jpg"]),
    }
    record.update(overrides)
    return record


def test_kind_values_follow_declaration_order():
    assert ProductKind(0) is ProductKind.UNKNOWN
    assert ProductKind(3) is ProductKind.DIGITAL_EQUIPMENT
    assert ProductKind(6) is ProductKind.HOME_APPLIANCES


def test_from_record_parses_fields():
    product = ProductInfo.from_record(_record())
    assert product.number == "P1"
    assert product.kind is ProductKind.DIGITAL_EQUIPMENT
    assert product.title == "Camera"
    assert product.description == {"brand": "Acme"}
    assert product.image == ["/img/a.jpg", "/img/b.jpg"]
    assert product.description_image == ["/img/d.jpg"]


def test_cover_and_base_price_use_first_entries():
    product = ProductInfo.from_record(_record())
    assert product.cover_image() == "/img/a.jpg"
    assert product.base_price() == "99.5"


def test_options_are_parsed_in_order():
    options = ProductInfo.from_record(_record()).options()
    assert [o.explain for o in options] == ["black", "white"]
    assert [o.quantity for o in options] == [4, 1]


def test_bytes_columns_are_accepted():
    record = _record(image=json.dumps(["/x.png"]).encode("utf-8"))
    assert ProductInfo.from_record(record).cover_image() == "/x.png"


def test_invalid_json_yields_empty_collections():
    product = ProductInfo.from_record(
        _record(description="{bad", classification="nope", image=None)
    )
    assert product.description == {}
    assert product.classification == []
    assert product.cover_image() == ""
    assert product.base_price() == ""


def test_wrong_json_shape_is_discarded():
    product = ProductInfo.from_record(_record(image=json.dumps({"a": 1})))
    assert product.image == []


def test_unknown_kind_falls_back():
    product = ProductInfo.from_record(_record(kind=42))
    assert product.kind is ProductKind.UNKNOWN


def test_option_defaults_for_missing_or_mistyped_fields():
    option = ClassificationOption.from_json({"price": 12, "quantity": "3"})
    assert option == ClassificationOption(explain="", price="", quantity=0)
    assert ClassificationOption.from_json(None) == ClassificationOption()


def test_option_integral_float_quantity():
    assert ClassificationOption.from_json({"quantity": 5.0}).quantity == 5


def test_cart_and_order_defaults():
    item = CartProduct("P1", "Camera", 2, "99.5")
    order = Order("n1", "2024-01-01", "199", "P1", "Camera")
    assert item.cover_picture == ""
    assert order.cover_picture == ""
    assert item.quantity == 2