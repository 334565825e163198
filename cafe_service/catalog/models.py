from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class CatalogError(Exception):
    """Raised when catalog data cannot be turned into a valid ``Catalog``."""


class Cafe(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    address: str = ""
    phone_number: str = ""


class Catalog(Mapping[str, tuple[Cafe, ...]]):
    """
    Read-only mapping of city key -> cafés in that city.

    City keys are case-sensitive. The order of cafés within a city is the
    order they were supplied in, and the order of cities is the order of
    first appearance.
    """

    def __init__(self, cities: Mapping[str, Iterable[Cafe]]) -> None:
        frozen: dict[str, tuple[Cafe, ...]] = {}
        for city, cafes in cities.items():
            if not city:
                raise CatalogError("city key must not be empty")
            frozen[city] = tuple(cafes)
        self._cities = MappingProxyType(frozen)

    @classmethod
    def from_mapping(cls, cities: Mapping[str, Iterable[Cafe | str]]) -> Catalog:
        """Build a catalog from cafés or bare café names."""
        return cls({
            city: [c if isinstance(c, Cafe) else Cafe(name=c) for c in cafes]
            for city, cafes in cities.items()
        })

    def __getitem__(self, city: str) -> tuple[Cafe, ...]:
        return self._cities[city]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} cities, {self.total_cafes()} cafes)"

    def total_cafes(self) -> int:
        return sum(len(cafes) for cafes in self._cities.values())
