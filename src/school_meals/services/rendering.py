"""Text rendering of meal records."""

from datetime import date

from school_meals.domain.meals import MealRecord

EMPTY_INPUT_MESSAGE = "날짜를 선택해주세요."
NO_DATA_MESSAGE = "해당 날짜에 급식 정보가 없습니다."
NETWORK_ERROR_MESSAGE = "급식 정보를 불러오는데 실패했습니다. 다시 시도해주세요."

_WEEKDAYS = ("월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일")


def format_long_date(value: str) -> str:
    """Format a YYYY-MM-DD date as a Korean long-form date."""
    day = date.fromisoformat(value)
    return f"{day.year}년 {day.month}월 {day.day}일 {_WEEKDAYS[day.weekday()]}"


def render_meal_record(record: MealRecord | None) -> str:
    """Render meals grouped by type under the long-form date."""
    if record is None or not record.meals:
        return NO_DATA_MESSAGE
    blocks = [format_long_date(record.date)]
    for meal in record.meals:
        lines = [meal.meal_type]
        lines.extend(f"- {item}" for item in meal.cleaned_menu)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
