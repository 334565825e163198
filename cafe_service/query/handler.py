from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from ..catalog.models import Cafe, Catalog
from ..config import RESPONSE_SEPARATOR
from .errors import InvalidCountError, UnknownCityError
from .models import CafeQuery

logger = logging.getLogger(__name__)

_COUNT_RE = re.compile(r"\+?[0-9]+")

# Largest count accepted: a signed 64-bit integer.
MAX_COUNT = 2**63 - 1


def parse_count(raw: str | None) -> int | None:
    """
    Parse the ``count`` query parameter.

    ``None`` or an empty string means the parameter is absent (no limit).
    Anything that is not a plain non-negative decimal raises
    ``InvalidCountError``.
    """
    if raw is None or raw == "":
        return None
    if not _COUNT_RE.fullmatch(raw):
        raise InvalidCountError(f"count {raw!r} is not a non-negative integer")
    try:
        count = int(raw)
    except ValueError as exc:
        # More digits than int() will convert.
        raise InvalidCountError(f"count of {len(raw)} digits is too large") from exc
    if count > MAX_COUNT:
        raise InvalidCountError(f"count {count} exceeds {MAX_COUNT}")
    return count


def parse_query(
    catalog: Catalog,
    city: str | None,
    count: str | None = None,
    search: str | None = None,
) -> CafeQuery:
    # City is checked before count: an unknown city with a bad count
    # reports the city.
    if not city or city not in catalog:
        raise UnknownCityError(f"city {city!r} is not in the catalog")
    return CafeQuery(city=city, count=parse_count(count), search=search or "")


def find_cafes(catalog: Catalog, query: CafeQuery) -> list[Cafe]:
    cafes = list(catalog[query.city])

    if query.search:
        needle = query.search.lower()
        cafes = [cafe for cafe in cafes if needle in cafe.name.lower()]

    if query.count is not None:
        cafes = cafes[:query.count]

    return cafes


def render_names(cafes: Sequence[Cafe], separator: str = RESPONSE_SEPARATOR) -> str:
    return separator.join(cafe.name for cafe in cafes)


def handle_cafe_query(
    catalog: Catalog,
    city: str | None,
    count: str | None = None,
    search: str | None = None,
) -> str:
    """
    Run a café lookup end to end and return the response body.

    Raises ``UnknownCityError`` or ``InvalidCountError`` on bad input;
    every other outcome, including an empty result, is a success.
    """
    query = parse_query(catalog, city, count, search)
    cafes = find_cafes(catalog, query)
    logger.debug(
        "Cafe query city=%s count=%s search=%r -> %d results",
        query.city, query.count, query.search, len(cafes),
    )
    return render_names(cafes)
