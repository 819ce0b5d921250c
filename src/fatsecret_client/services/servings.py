"""Serving normalization: per-serving nutrients to per-metric-unit tables."""

import logging
import math
import re
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from fatsecret_client.domain.servings import (
    GENERIC_SERVING_LABEL,
    PER_UNIT_FIELDS,
    ServingRecord,
    ServingTable,
)

_logger = logging.getLogger(__name__)

_THREE_PLACES = Decimal("0.001")
# Plain decimal or exponent notation; underscores, inf and nan do not count.
_NUMERIC_KEY = re.compile(
    r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII
)


def servings_from_food(payload: object) -> list[ServingRecord]:
    """Extract ``food.servings.serving`` from a ``food.get`` response as a list.

    The API returns a single object when a food has exactly one serving and
    a list otherwise.
    """
    if not isinstance(payload, Mapping):
        return []
    food = payload.get("food")
    servings = food.get("servings") if isinstance(food, Mapping) else None
    serving = servings.get("serving") if isinstance(servings, Mapping) else None
    if isinstance(serving, Mapping):
        return [dict(serving)]
    if isinstance(serving, list):
        return [dict(item) for item in serving if isinstance(item, Mapping)]
    return []


def index_servings(servings: Iterable[Mapping[str, object]]) -> ServingTable:
    """Key servings by measurement description; later duplicates overwrite."""
    table: ServingTable = {}
    for serving in servings:
        description = serving.get("measurement_description")
        if description in (None, ""):
            _logger.debug("Skipping serving without a description: %s", serving)
            continue
        table[str(description)] = dict(serving)
    return table


def metric_unit_index(table: ServingTable) -> dict[str, str]:
    """Map each metric serving unit to the description of its reference serving.

    When two servings share a metric unit the later one in iteration order
    wins.
    """
    units: dict[str, str] = {}
    for description, serving in table.items():
        unit = serving.get("metric_serving_unit")
        if unit in (None, ""):
            continue
        units[str(unit)] = description
    return units


def per_unit_serving(
    reference: Mapping[str, object], unit: str
) -> ServingRecord | None:
    """Rescale a serving to one metric unit, or None if it has no usable amount."""
    amount = _parse_number(reference.get("metric_serving_amount"))
    if not amount:
        return None
    record: ServingRecord = {
        field: _round3((_parse_number(reference.get(field)) or 0.0) / amount)
        for field in PER_UNIT_FIELDS
    }
    record["number_of_units"] = 1
    record["measurement_description"] = unit
    record["metric_serving_unit"] = unit
    record["serving_description"] = unit
    return record


def add_metric_units(table: ServingTable) -> ServingTable:
    """Add a per-unit entry for every metric unit that is not already a key."""
    for unit, description in metric_unit_index(table).items():
        if unit in table:
            continue
        record = per_unit_serving(table[description], unit)
        if record is None:
            _logger.debug(
                "Skipping metric unit %s: unusable metric_serving_amount in %r",
                unit,
                description,
            )
            continue
        table[unit] = record
    return table


def relabel_servings(table: ServingTable) -> ServingTable:
    """Disambiguate generic ``serving`` keys and drop purely numeric keys."""
    relabeled: ServingTable = {}
    for key, serving in table.items():
        description = serving.get("serving_description")
        if key == GENERIC_SERVING_LABEL and description:
            relabeled[f"{key}({description})"] = serving
        elif _is_numeric(key):
            continue
        else:
            relabeled[key] = serving
    return relabeled


def normalize_servings(servings: Iterable[Mapping[str, object]]) -> ServingTable:
    """Build the per-unit serving table for a sequence of raw servings."""
    table = index_servings(servings)
    if not table:
        return {}
    return relabel_servings(add_metric_units(table))


def _parse_number(value: object) -> float | None:
    if value is None or value == "":
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _round3(value: float) -> float:
    """Round to three places, halves away from zero."""
    try:
        rounded = Decimal(repr(value)).quantize(_THREE_PLACES, rounding=ROUND_HALF_UP)
        return float(rounded)
    except InvalidOperation:
        return value


def _is_numeric(key: str) -> bool:
    return _NUMERIC_KEY.fullmatch(key) is not None
