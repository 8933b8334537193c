"""Command-line front end for the store: catalogue, product pages, profile and orders."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from typing import Optional, Sequence

from .catalog import PAGE_SIZE, ProductCatalog, ProductPager, SearchType
from .detail import (
    ADDRESS_REQUIRED,
    AddressRequiredError,
    OutOfStockError,
    ProductDetail,
)
from .models import Order, ProductInfo
from .userinfo import Address, UserInfoManager

NO_MORE_PRODUCTS = "没有更多商品了"
PURCHASE_DONE = "购买成功"


class _CommandError(Exception):
    """A command could not be carried out; the message is shown to the user."""


def _product_line(product: ProductInfo) -> str:
    return f"{product.number}\t{product.title}\t￥{product.base_price()}"


def _order_line(order: Order) -> str:
    return f"{order.time}\t{order.number}\t{order.product_title}\t{order.total_price}"


def _open_catalog(connection: sqlite3.Connection) -> ProductCatalog:
    catalog = ProductCatalog(connection)
    catalog.create_schema()
    return catalog


def _load_pages(pager: ProductPager, pages: int) -> list[ProductInfo]:
    """Load the first screen, then ``pages - 1`` further pages while any remain."""
    loaded = list(pager.load_page(2))
    for _ in range(max(pages, 1) - 1):
        if pager.exhausted:
            break
        loaded.extend(pager.load_page())
    return loaded


def _print_products(products: Sequence[ProductInfo]) -> None:
    if not products:
        print(NO_MORE_PRODUCTS)
        return
    for product in products:
        print(_product_line(product))


def _find_product(catalog: ProductCatalog, number: str) -> ProductInfo:
    offset = 0
    while True:
        batch = catalog.fetch(offset, PAGE_SIZE)
        if not batch:
            raise _CommandError(f"no product numbered {number!r}")
        for product in batch:
            if product.number == number:
                return product
        offset += len(batch)


def _cmd_import(args: argparse.Namespace) -> None:
    with closing(sqlite3.connect(args.db)) as connection:
        catalog = _open_catalog(connection)
        try:
            count = catalog.import_information(args.index)
        except OSError as exc:
            raise _CommandError(f"cannot read {args.index}: {exc}") from exc
        except ValueError as exc:
            raise _CommandError(f"invalid index {args.index}: {exc}") from exc
    print(count)


def _cmd_list(args: argparse.Namespace) -> None:
    with closing(sqlite3.connect(args.db)) as connection:
        pager = ProductPager(_open_catalog(connection), SearchType.SEARCH_BY_NAME, None)
        _print_products(_load_pages(pager, args.pages))


def _cmd_search(args: argparse.Namespace) -> None:
    search_type = SearchType.SEARCH_BY_CLASSIFY if args.kind else SearchType.SEARCH_BY_NAME
    with closing(sqlite3.connect(args.db)) as connection:
        pager = ProductPager(_open_catalog(connection), search_type, args.keyword)
        _print_products(_load_pages(pager, args.pages))


def _cmd_show(args: argparse.Namespace) -> None:
    with closing(sqlite3.connect(args.db)) as connection:
        product = _find_product(_open_catalog(connection), args.number)
    print(product.title)
    for option in product.options():
        print(f"{option.explain}\t￥{option.price}\t{option.quantity}")
    for key in sorted(product.description):
        print(f"{key} : {product.description[key]}")


def _load_manager(path: str) -> UserInfoManager:
    manager = UserInfoManager(path)
    manager.load()
    return manager


def _cmd_profile(args: argparse.Namespace) -> None:
    manager = _load_manager(args.settings)
    changes = {
        "account_number": args.account,
        "user_name": args.name,
        "portrait": args.portrait,
    }
    changed = False
    for attribute, value in changes.items():
        if value is not None:
            setattr(manager, attribute, value)
            changed = True
    if changed:
        manager.save()
    print(f"account: {manager.account_number}")
    print(f"name: {manager.user_name}")
    print(f"portrait: {manager.portrait}")


def _cmd_address(args: argparse.Namespace) -> None:
    manager = _load_manager(args.settings)
    if args.action == "add":
        manager.addresses.add(
            Address(
                receiver_name=args.receiver,
                phone_number=args.phone,
                province=args.province,
                city=args.city,
                area=args.area,
                detail_address=args.detail,
                is_default=args.default,
            )
        )
        manager.save()
    elif args.action == "remove":
        try:
            manager.addresses.remove(args.index)
        except IndexError as exc:
            raise _CommandError(f"no address at index {args.index}") from exc
        manager.save()
    for index, address in enumerate(manager.addresses):
        marker = "*" if address.is_default else " "
        print(f"{index}{marker}\t{address}")


def _choose_address(manager: UserInfoManager, index: Optional[int]) -> Address:
    book = manager.addresses
    if index is not None:
        try:
            return book[index]
        except IndexError as exc:
            raise _CommandError(f"no address at index {index}") from exc
    for address in book:
        if address.is_default:
            return address
    if len(book):
        return book[0]
    raise AddressRequiredError(ADDRESS_REQUIRED)


def _cmd_buy(args: argparse.Namespace) -> None:
    if args.quantity < 1:
        raise _CommandError("quantity must be at least 1")
    manager = _load_manager(args.settings)
    with closing(sqlite3.connect(args.db)) as connection:
        product = _find_product(_open_catalog(connection), args.number)
    try:
        detail = ProductDetail(product, manager)
    except ValueError as exc:
        raise _CommandError(str(exc)) from exc
    if args.option is not None:
        try:
            detail.select_option(args.option)
        except KeyError as exc:
            raise _CommandError(f"no option {args.option!r}") from exc
    for _ in range(args.quantity - 1):
        detail.increase()
    detail.set_address(str(_choose_address(manager, args.address)))
    order = detail.buy()
    print(PURCHASE_DONE)
    print(_order_line(order))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shopstore", description="Online store.")
    commands = parser.add_subparsers(dest="command", required=True)

    imp = commands.add_parser("import", help="load products from an information index")
    imp.add_argument("--db", required=True)
    imp.add_argument("index")
    imp.set_defaults(handler=_cmd_import)

    lst = commands.add_parser("list", help="list products")
    lst.add_argument("--db", required=True)
    lst.add_argument("--pages", type=int, default=1)
    lst.set_defaults(handler=_cmd_list)

    search = commands.add_parser("search", help="search products by title or kind")
    search.add_argument("--db", required=True)
    search.add_argument("--kind", action="store_true", help="treat the keyword as a kind number")
    search.add_argument("--pages", type=int, default=1)
    search.add_argument("keyword")
    search.set_defaults(handler=_cmd_search)

    show = commands.add_parser("show", help="show one product")
    show.add_argument("--db", required=True)
    show.add_argument("number")
    show.set_defaults(handler=_cmd_show)

    profile = commands.add_parser("profile", help="show or change the user profile")
    profile.add_argument("--settings", required=True)
    profile.add_argument("--account")
    profile.add_argument("--name")
    profile.add_argument("--portrait")
    profile.set_defaults(handler=_cmd_profile)

    address = commands.add_parser("address", help="manage delivery addresses")
    address.add_argument("--settings", required=True)
    actions = address.add_subparsers(dest="action", required=True)
    actions.add_parser("list")
    add = actions.add_parser("add")
    add.add_argument("--receiver", required=True)
    add.add_argument("--phone", required=True)
    add.add_argument("--province", default="")
    add.add_argument("--city", default="")
    add.add_argument("--area", default="")
    add.add_argument("--detail", default="")
    add.add_argument("--default", action="store_true")
    remove = actions.add_parser("remove")
    remove.add_argument("index", type=int)
    address.set_defaults(handler=_cmd_address)

    buy = commands.add_parser("buy", help="buy a product")
    buy.add_argument("--db", required=True)
    buy.add_argument("--settings", required=True)
    buy.add_argument("--option")
    buy.add_argument("--quantity", type=int, default=1)
    buy.add_argument("--address", type=int)
    buy.add_argument("number")
    buy.set_defaults(handler=_cmd_buy)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one store command; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (_CommandError, OutOfStockError, AddressRequiredError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except sqlite3.Error as exc:
        print(f"database error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())