import pytest

from shopstore.cart import CartLine, ShoppingCart
from shopstore.models import CartProduct
from shopstore.userinfo import UserInfoManager


@pytest.fixture
def manager(tmp_path):
    m = UserInfoManager(tmp_path / "user_info.ini")
    m.add_cart_product(CartProduct("A", "Apple", 1, "10"))
    m.add_cart_product(CartProduct("B", "Bread", 1, "4"))
    return m


def test_total_starts_at_zero(manager):
    cart = ShoppingCart(manager)
    assert cart.total() == 0
    assert [line.number for line in cart.lines] == ["A", "B"]


def test_check_all_sums_subtotals(manager):
    cart = ShoppingCart(manager)
    cart.set_all_checked(True)
    assert cart.total() == pytest.approx(sum(line.subtotal() for line in cart.lines))
    cart.set_all_checked(False)
    assert cart.total() == 0


def test_checking_twice_counts_once(manager):
    cart = ShoppingCart(manager)
    line = cart.lines[0]
    line.set_checked(True)
    line.set_checked(True)
    assert cart.total() == pytest.approx(line.subtotal())


def test_increase_updates_total_when_checked(manager):
    cart = ShoppingCart(manager)
    line = cart.lines[0]
    line.set_checked(True)
    assert line.increase() == 2
    assert line.subtotal() == pytest.approx(2 * line.unit_price)
    assert cart.total() == pytest.approx(line.subtotal())


def test_unchecked_changes_leave_total(manager):
    cart = ShoppingCart(manager)
    cart.lines[1].increase()
    assert cart.total() == 0


def test_decrease_stops_at_one():
    line = CartLine(CartProduct("A", "Apple", 1, "10"))
    assert line.decrease() == 1
    line.increase()
    assert line.decrease() == 1


def test_remove_line(manager):
    cart = ShoppingCart(manager)
    cart.set_all_checked(True)
    kept = cart.lines[1]
    cart.remove("A")
    assert [line.number for line in cart.lines] == ["B"]
    assert not manager.in_cart("A")
    assert cart.total() == pytest.approx(kept.subtotal())


def test_remove_unchecked_never_negative(manager):
    cart = ShoppingCart(manager)
    cart.remove("B")
    assert cart.total() == 0


def test_remove_unknown(manager):
    cart = ShoppingCart(manager)
    with pytest.raises(KeyError):
        cart.remove("Z")


def test_invalid_price_counts_as_zero():
    line = CartLine(CartProduct("A", "Apple", 1, "n/a"))
    line.increase()
    assert line.subtotal() == 0