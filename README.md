# shopstore

A small shop back end in pure Python with no dependencies outside the
standard library. Products are kept in an SQLite database. On top of it
the package provides account checks, paging and searching through the
catalogue, a product page model (option, quantity, buy, cart,
favourites), a shopping cart with a running total, delivery addresses,
and a few helpers for timed offers, a rotating banner and region lookups.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `shopstore` command. Its subcommands are:

- `import --db FILE INDEX`: loads products from an information index
  into the database and prints how many were stored.
- `list --db FILE [--pages N]`: lists products as number, title and
  price.
- `search --db FILE [--kind] [--pages N] KEYWORD`: searches by title.
  With `--kind`, the keyword is taken as a kind number.
- `show --db FILE NUMBER`: prints a product's title, options and
  description.
- `profile --settings FILE [--account A] [--name N] [--portrait P]`:
  shows the profile in the settings file and changes it if asked.
- `address --settings FILE list | add ... | remove INDEX`: manages
  delivery addresses. The default address is marked with `*`.
- `buy --db FILE --settings FILE [--option EXPLAIN] [--quantity N]
  [--address INDEX] NUMBER`: buys a product and prints the order. The
  address is the one at the given index, or else the default, or else
  the first one.

Run `shopstore --help` or `shopstore SUBCOMMAND --help` for details.
Each command exits with status 1 and a message on standard error when it
fails.

## Library overview

- `shopstore.models`: `ProductInfo` and `ProductKind`. A `ProductInfo`
  is built with `from_record` and has the methods `options()`,
  `cover_image()` and `base_price()`. The module also holds
  `ClassificationOption`, `CartProduct` and `Order`.
- `shopstore.accounts`: `check_account` accepts 8 to 12 digits that do
  not start with 0. `check_password` accepts 8 to 15 ASCII letters and
  digits with at least one of each. `AccountStore` works on an
  `sqlite3` connection. It provides `create_schema`, `login` and
  `register`, and raises `AccountError` with a message when either of the
  last two fails.
- `shopstore.catalog`: `ProductCatalog` provides `create_schema`,
  `insert_product`, `import_information` and `fetch`. `ProductPager`
  fetches pages of 21 products and appends them to `rows`, which are
  rows of 7 padded with `None`. It also has `restart` to begin a new
  name search. `SearchType` selects a search by name or by kind, and
  `grid_rows` does the row layout.
- `shopstore.userinfo`: `Address`, `AddressBook` and `UserInfoManager`.
  `load` and `save` read and write the account, name, portrait and
  address book in an INI file. Favourites, cart and orders are held in
  memory only.
- `shopstore.detail`: `ProductDetail` covers one product page. It lets
  you choose an option, increase the quantity up to the option's stock
  (raising `OutOfStockError` beyond it), set an address, `buy`,
  `add_to_cart` and `toggle_collect`. The last three raise
  `AddressRequiredError` when no address is set, and `add_to_cart`
  raises `AlreadyInCartError` for a product that is already in the cart.
  `make_order_number` builds order numbers.
- `shopstore.cart`: `ShoppingCart` holds a `CartLine` for each cart
  product. Its `total()` is the sum of the checked lines.
- `shopstore.lowprice`: `Countdown`, `format_countdown` and
  `seconds_until` for a timed sale, `ProductStrip`, which shows three
  consecutive items of a circular list, and `load_offers` for offer files.
- `shopstore.carousel`: `Carousel` steps through banner pictures and
  turns clicks on its arrow areas into steps.
- `shopstore.regions`: `RegionTree` looks up provinces, cities and
  areas, in sorted order, from a nested JSON mapping.

## Example

```python
import sqlite3

from shopstore.catalog import ProductCatalog, ProductPager, SearchType
from shopstore.userinfo import UserInfoManager

connection = sqlite3.connect("shop.db")
catalog = ProductCatalog(connection)
catalog.create_schema()
catalog.import_information("products/information.json")

pager = ProductPager(catalog, SearchType.SEARCH_BY_NAME, "phone")
products = pager.load_page(2)   # the products just loaded
grid = pager.rows               # all loaded products, 7 per row

manager = UserInfoManager("user_info.ini")
manager.load()
```

## What it does not do

- There is no graphical interface. The command line is the only front
  end.
- Accounts are available only through `AccountStore`. The command line
  has no login or registration commands and does not check who is using
  it.
- The cart, favourites and orders are not saved between runs. `buy`
  prints the order it made, but the order is not kept anywhere.