"""Shop back end: SQLite catalogue, accounts, product pages, cart, orders, favourites and addresses."""

__version__ = "0.1.0"