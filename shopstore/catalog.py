"""Product catalogue storage, search and page-wise loading."""

from __future__ import annotations

import json
import sqlite3
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from .models import ProductInfo

COLUMNS = 7
PAGE_SIZE = COLUMNS * 3

_PRODUCT_COLUMNS = (
    "product_number",
    "kind",
    "title",
    "description",
    "classification",
    "image",
    "description_image",
)


class SearchType(Enum):
    """How a keyword selects products."""

    SEARCH_BY_NAME = "name"
    SEARCH_BY_CLASSIFY = "classify"


def grid_rows(products: Iterable[Any], columns: int = COLUMNS) -> list[list[Any]]:
    """Lay products out in rows of ``columns``; the last row is padded with None."""
    if columns < 1:
        raise ValueError("columns must be at least 1")
    rows: list[list[Any]] = []
    row: list[Any] = []
    for product in products:
        row.append(product)
        if len(row) == columns:
            rows.append(row)
            row = []
    if row:
        row.extend([None] * (columns - len(row)))
        rows.append(row)
    return rows


def _keyword_kind(keyword: str) -> int:
    try:
        return int(keyword.strip())
    except (AttributeError, ValueError):
        return 0


def _json_text(value: Any, expected: type) -> str:
    if not isinstance(value, expected):
        value = expected()
    return json.dumps(value, ensure_ascii=False, indent=4)


class ProductCatalog:
    """Products kept in the ``product`` table of a SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def create_schema(self) -> None:
        self.connection.execute(
            "CREATE TABLE IF NOT EXISTS product ("
            "product_number TEXT, kind INTEGER, title TEXT, description TEXT, "
            "classification TEXT, image TEXT, description_image TEXT)"
        )
        self.connection.commit()

    def insert_product(self, kind: int, product: Mapping[str, Any]) -> None:
        """Store one product given as it appears in a catalogue information file."""
        number = product.get("number")
        title = product.get("title")
        self.connection.execute(
            "INSERT INTO product (product_number, kind, title, description, "
            "classification, image, description_image) VALUES (?, ?, ?, ?, ?, ?, ?)",
            (
                number if isinstance(number, str) else "",
                int(kind),
                title if isinstance(title, str) else "",
                _json_text(product.get("description"), dict),
                _json_text(product.get("classification"), list),
                _json_text(product.get("image"), list),
                _json_text(product.get("description_image"), list),
            ),
        )
        self.connection.commit()

    def import_information(self, index_path) -> int:
        """Load every product file listed in an index and return how many were stored.

        The index maps names to file paths relative to the index's directory.
        Files that cannot be opened are skipped; a failed insert raises.
        """
        index_path = Path(index_path)
        with open(index_path, encoding="utf-8") as handle:
            index = json.load(handle)
        if not isinstance(index, dict):
            return 0
        base = index_path.parent
        inserted = 0
        for key in sorted(index):
            relative = index[key]
            if not isinstance(relative, str):
                continue
            info_path = base / relative.lstrip("/\\")
            try:
                with open(info_path, encoding="utf-8") as handle:
                    info = json.load(handle)
            except (OSError, ValueError):
                continue
            if not isinstance(info, dict):
                continue
            kind = info.get("kind")
            kind = kind if isinstance(kind, int) and not isinstance(kind, bool) else 0
            products = info.get("products")
            for product in products if isinstance(products, list) else []:
                if not isinstance(product, Mapping):
                    product = {}
                self.insert_product(kind, product)
                inserted += 1
        return inserted

    def fetch(
        self,
        offset: int,
        limit: int = PAGE_SIZE,
        search_type: Optional[SearchType] = None,
        keyword: Optional[str] = None,
    ) -> list[ProductInfo]:
        """Return up to ``limit`` products from ``offset``, filtered by the keyword."""
        sql = f"SELECT {', '.join(_PRODUCT_COLUMNS)} FROM product"
        params: list[Any] = []
        if keyword is not None and search_type is SearchType.SEARCH_BY_NAME:
            sql += " WHERE title LIKE ?"
            params.append(f"%{keyword}%")
        elif keyword is not None and search_type is SearchType.SEARCH_BY_CLASSIFY:
            sql += " WHERE kind = ?"
            params.append(_keyword_kind(keyword))
        sql += " ORDER BY rowid LIMIT ? OFFSET ?"
        params.extend([int(limit), int(offset)])
        cursor = self.connection.execute(sql, params)
        return [
            ProductInfo.from_record(dict(zip(_PRODUCT_COLUMNS, row)))
            for row in cursor.fetchall()
        ]


class ProductPager:
    """Loads products page by page into a grid of rows."""

    def __init__(
        self,
        catalog: ProductCatalog,
        search_type: SearchType = SearchType.SEARCH_BY_NAME,
        keyword: Optional[str] = None,
    ) -> None:
        self.catalog = catalog
        self.search_type = search_type
        self.keyword = keyword
        self.record_size = 0
        self.rows: list[list[Optional[ProductInfo]]] = []
        self.exhausted = False

    def load_page(self, page_count: int = 1) -> list[ProductInfo]:
        """Fetch the next page, append it to ``rows`` and return what was loaded."""
        products = self.catalog.fetch(
            self.record_size * page_count, PAGE_SIZE, self.search_type, self.keyword
        )
        self.record_size += len(products)
        self.rows.extend(grid_rows(products, COLUMNS))
        if not products:
            self.exhausted = True
        return products

    def restart(self, keyword: str) -> list[ProductInfo]:
        """Start a new name search; an empty keyword leaves everything unchanged."""
        if not keyword:
            return []
        self.rows = []
        self.record_size = 0
        self.exhausted = False
        self.keyword = keyword
        self.search_type = SearchType.SEARCH_BY_NAME
        return self.load_page(2)