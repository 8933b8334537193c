import pytest

from shopstore.models import CartProduct, Order, ProductInfo
from shopstore.userinfo import Address, AddressBook, UserInfoManager


def _address(name="Li", default=False):
    return Address(
        receiver_name=name,
        phone_number="000",
        province="P",
        city="C",
        area="A",
        detail_address="Road 1",
        is_default=default,
    )


def test_address_string_format():
    assert str(_address()) == "P C A Road 1 (Li 收) 000"


def test_address_json_layout():
    data = _address(default=True).to_json()
    assert data["receiverName"] == "Li"
    assert data["phone_number"] == "000"
    assert data["address"]["detail_address"] == "Road 1"
    assert data["default"] is True


def test_address_round_trip():
    original = _address(default=True)
    assert Address.from_json(original.to_json()) == original


def test_address_accepts_receiver_key():
    assert Address.from_json({"receiver": "Wang"}).receiver_name == "Wang"


def test_address_from_garbage_is_empty():
    assert Address.from_json(["x"]) == Address()


def test_book_add_remove_and_index():
    book = AddressBook()
    book.add(_address("a"))
    book.add(_address("b"))
    book.add(_address("c"))
    book.remove(1)
    assert len(book) == 2
    assert [a.receiver_name for a in book] == ["a", "c"]
    assert book[1].receiver_name == "c"


def test_book_remove_out_of_range():
    with pytest.raises(IndexError):
        AddressBook().remove(0)


def test_book_json_round_trip_from_text():
    import json

    book = AddressBook([_address("a"), _address("b", True)])
    restored = AddressBook.from_json(json.dumps(book.to_json()))
    assert list(restored) == list(book)


def test_book_from_non_list():
    assert len(AddressBook.from_json('{"a": 1}')) == 0
    assert len(AddressBook.from_json("not json")) == 0


def test_manager_save_and_load(tmp_path):
    path = tmp_path / "user_info.ini"
    manager = UserInfoManager(path)
    manager.account_number = "10000000"
    manager.user_name = "张三"
    manager.portrait = "/pics/me.png"
    manager.addresses.add(_address("张三", True))
    manager.save()

    other = UserInfoManager(path)
    other.load()
    assert other.account_number == "10000000"
    assert other.user_name == "张三"
    assert other.portrait == "/pics/me.png"
    assert list(other.addresses) == list(manager.addresses)


def test_manager_load_missing_file(tmp_path):
    manager = UserInfoManager(tmp_path / "absent.ini")
    manager.user_name = "x"
    manager.load()
    assert manager.user_name == ""
    assert len(manager.addresses) == 0


def test_collected_products():
    manager = UserInfoManager("unused.ini")
    manager.add_collected(ProductInfo(number="1"))
    manager.add_collected(ProductInfo(number="1"))
    manager.add_collected(ProductInfo(number="2"))
    assert manager.is_collected("1")
    manager.remove_collected("1")
    assert not manager.is_collected("1")
    assert [p.number for p in manager.collected] == ["2"]


def test_cart_products():
    manager = UserInfoManager("unused.ini")
    manager.add_cart_product(CartProduct("1", "t", 1, "5"))
    assert manager.in_cart("1")
    assert not manager.in_cart("2")
    manager.remove_cart_product("1")
    assert manager.cart == []


def test_orders():
    manager = UserInfoManager("unused.ini")
    first = Order("a", "2024-01-01", "5", "1", "t")
    second = Order("b", "2024-01-01", "6", "2", "u")
    manager.add_order(first)
    manager.add_order(second)
    manager.remove_order("a")
    assert manager.orders == [second]