"""Meal lookup service."""

import logging
from dataclasses import dataclass

from school_meals.adapters.neis_client import NeisClient
from school_meals.domain.dates import require_date, to_query_key
from school_meals.domain.errors import NoDataResult
from school_meals.domain.meals import MealRecord
from school_meals.services.parser import parse_meal_xml

_logger = logging.getLogger(__name__)


@dataclass
class MealService:
    """Runs the fetch-and-parse pipeline for a single date."""

    client: NeisClient

    async def get_meals(self, date: str) -> MealRecord | None:
        """Fetch and parse meals for a YYYY-MM-DD date.

        NetworkError from the client propagates; None means no data.
        """
        xml_text = await self.client.fetch_meal_xml(to_query_key(date))
        return parse_meal_xml(xml_text, date)

    async def lookup(self, date: str | None) -> MealRecord:
        """Validate input and return a populated record.

        Raises EmptyInputError before any request when no date is given,
        NetworkError on fetch failure, and NoDataResult when the service
        has nothing to show for the date.
        """
        resolved = require_date(date)
        record = await self.get_meals(resolved)
        if record is None or not record.meals:
            _logger.info("No meal data: date=%s", resolved)
            raise NoDataResult(f"No meal information for {resolved}")
        return record
