from school_adviser.builders.base import NEISBuilder
from school_adviser.builders.resources import MEAL
from school_adviser.services.neis_api_service import NEISAPIService


class MealBuilder(NEISBuilder):
    """
    급식식단정보(mealServiceDietInfo) 빌더

    요리명은 목록으로, 원산지/영양 정보는 항목별 dict 목록으로 정규화된다.

    Example:
        meals = await (
            MealBuilder("J10", "7530045")
            .with_between("20230801", "20230831")
            .build()
        )
    """

    resource = MEAL

    def __init__(self, sc_code: str, school_code: str, service: NEISAPIService | None = None):
        super().__init__(service, sc_code=sc_code, school_code=school_code)

    def with_meal_code(self, meal_code: str) -> "MealBuilder":
        """식사코드 (1: 조식, 2: 중식, 3: 석식)"""
        return self._set("meal_code", meal_code)

    def with_date(self, date: str) -> "MealBuilder":
        """급식일자 (YYYYMMDD)"""
        return self._set("date", date)

    def with_from(self, from_date: str) -> "MealBuilder":
        """급식시작일자 (YYYYMMDD)"""
        return self._set("from_date", from_date)

    def with_to(self, to_date: str) -> "MealBuilder":
        """급식종료일자 (YYYYMMDD)"""
        return self._set("to_date", to_date)
