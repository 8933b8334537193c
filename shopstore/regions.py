"""Province, city and area choices for address entry."""

from __future__ import annotations

import json
from typing import Any


def _mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


class RegionTree:
    """A nested province → city → area mapping; names are listed in sorted order."""

    def __init__(self, data: Any) -> None:
        self.data = _mapping(data)

    @classmethod
    def from_file(cls, path) -> "RegionTree":
        with open(path, encoding="utf-8") as handle:
            return cls(json.load(handle))

    def provinces(self) -> list[str]:
        return sorted(self.data)

    def cities(self, province: str) -> list[str]:
        return sorted(_mapping(self.data.get(province)))

    def areas(self, province: str, city: str) -> list[str]:
        return sorted(_mapping(_mapping(self.data.get(province)).get(city)))

    def default_selection(self) -> tuple[str, str, str]:
        """First province, its first city and that city's first area ("" if none)."""
        provinces = self.provinces()
        if not provinces:
            raise ValueError("no provinces available")
        province = provinces[0]
        cities = self.cities(province)
        city = cities[0] if cities else ""
        areas = self.areas(province, city) if city else []
        area = areas[0] if areas else ""
        return province, city, area