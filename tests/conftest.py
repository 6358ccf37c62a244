"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from school_meals.adapters.neis_client import NeisClient
from school_meals.config import Settings
from school_meals.containers import AppContainer
from school_meals.services.meals import MealService


def meal_xml(rows: list[tuple[str, str]], code: str = "INFO-000") -> str:
    """Build a NEIS-style meal response with the given (type, dishes) rows."""
    row_xml = "".join(
        "<row>"
        "<ATPT_OFCDC_SC_CODE>J10</ATPT_OFCDC_SC_CODE>"
        f"<MMEAL_SC_NM><![CDATA[{meal_type}]]></MMEAL_SC_NM>"
        f"<DDISH_NM><![CDATA[{dishes}]]></DDISH_NM>"
        "</row>"
        for meal_type, dishes in rows
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        "<mealServiceDietInfo>"
        "<head>"
        f"<list_total_count>{len(rows)}</list_total_count>"
        f"<RESULT><CODE>{code}</CODE><MESSAGE>정상 처리되었습니다.</MESSAGE></RESULT>"
        "</head>"
        f"{row_xml}"
        "</mealServiceDietInfo>"
    )


NO_DATA_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    "<RESULT><CODE>INFO-200</CODE><MESSAGE>해당하는 데이터가 없습니다.</MESSAGE></RESULT>"
)


@dataclass
class FakeNeisClient(NeisClient):
    """Fake NEIS client returning a fixed payload and recording query keys."""

    payload: str = field(
        default_factory=lambda: meal_xml(
            [("조식", "쌀밥<br/>미역국 5.6."), ("중식", "비빔밥 1.5.<br/>김치 9.")]
        )
    )
    error: Exception | None = None
    query_keys: list[str] = field(default_factory=list)

    async def fetch_meal_xml(self, query_key: str) -> str:
        self.query_keys.append(query_key)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def neis_client() -> FakeNeisClient:
    return FakeNeisClient()


@pytest.fixture
def container(settings: Settings, neis_client: FakeNeisClient) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        neis_client=neis_client,
        meal_service=MealService(neis_client),
        close_resources=close_resources,
    )
