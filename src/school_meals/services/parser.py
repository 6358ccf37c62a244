"""Parsing of NEIS meal service XML."""

import logging
import xml.etree.ElementTree as ET

from school_meals.domain.meals import MealGroup, MealRecord

SUCCESS_CODE = "INFO-000"
DISH_SEPARATOR = "<br/>"

_logger = logging.getLogger(__name__)


def parse_meal_xml(text: str, date: str) -> MealRecord | None:
    """Parse a meal service response into a MealRecord.

    Returns None when the document cannot be parsed, carries a non-success
    result code, or holds no rows. Rows missing a meal type or dish field
    are skipped.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        _logger.warning("Unparseable meal response for %s: %s", date, exc)
        return None

    result = next(root.iter("RESULT"), None)
    if result is not None:
        code = _text_of(result, "CODE")
        if code and code != SUCCESS_CODE:
            _logger.warning("Meal service returned %s for %s", code, date)
            return None

    rows = list(root.iter("row"))
    if not rows:
        return None

    groups: dict[str, list[str]] = {}
    for row in rows:
        meal_type = _text_of(row, "MMEAL_SC_NM")
        dish_name = _text_of(row, "DDISH_NM")
        if meal_type is None or dish_name is None:
            continue
        groups.setdefault(meal_type, []).extend(_split_dishes(dish_name))

    return MealRecord(
        date=date,
        meals=tuple(
            MealGroup(meal_type=meal_type, menu=tuple(menu))
            for meal_type, menu in groups.items()
        ),
    )


def _text_of(element: ET.Element, tag: str) -> str | None:
    """Return the full text content of the first descendant with the tag."""
    child = next(element.iter(tag), None)
    if child is None:
        return None
    return "".join(child.itertext())


def _split_dishes(raw: str) -> list[str]:
    return [item for item in raw.split(DISH_SEPARATOR) if item.strip()]
