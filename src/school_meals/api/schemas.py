"""Pydantic models for meal API responses."""

from pydantic import BaseModel

from school_meals.domain.meals import MealRecord
from school_meals.services.rendering import format_long_date, render_meal_record


class MealGroupOut(BaseModel):
    """One meal type with its cleaned dishes."""

    meal_type: str
    menu: list[str]


class MealResponse(BaseModel):
    """Meal lookup result for a single date."""

    date: str
    display_date: str
    meals: list[MealGroupOut] = []
    text: str | None = None
    message: str | None = None

    @classmethod
    def from_record(cls, record: MealRecord) -> "MealResponse":
        return cls(
            date=record.date,
            display_date=format_long_date(record.date),
            meals=[
                MealGroupOut(meal_type=meal.meal_type, menu=meal.cleaned_menu)
                for meal in record.meals
            ],
            text=render_meal_record(record),
        )

    @classmethod
    def no_data(cls, date: str, message: str) -> "MealResponse":
        return cls(date=date, display_date=format_long_date(date), message=message)
