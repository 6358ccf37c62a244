"""Meal domain models."""

from dataclasses import dataclass

from school_meals.domain.cleaner import clean_menu_item


@dataclass(frozen=True)
class MenuItem:
    """A single dish as extracted from the source."""

    raw: str

    @property
    def cleaned(self) -> str:
        """Dish name with allergen codes stripped."""
        return clean_menu_item(self.raw)


@dataclass(frozen=True)
class MealGroup:
    """All dishes served under one meal-type label."""

    meal_type: str
    menu: tuple[str, ...]

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return tuple(MenuItem(raw) for raw in self.menu)

    @property
    def cleaned_menu(self) -> list[str]:
        return [item.cleaned for item in self.items]


@dataclass(frozen=True)
class MealRecord:
    """Meals for one queried date, groups in first-seen order."""

    date: str
    meals: tuple[MealGroup, ...]

    def group(self, meal_type: str) -> MealGroup | None:
        """Return the group for a meal-type label, if present."""
        for meal in self.meals:
            if meal.meal_type == meal_type:
                return meal
        return None
