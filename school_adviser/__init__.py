"""
school_adviser: NEIS 교육정보 개방 포털 비동기 클라이언트

학교기본정보, 급식식단정보, 학원교습소정보, 초/중/고 시간표를 조회하고
응답의 날짜/여부/목록 필드를 파이썬 타입으로 정규화한다.

Usage:
    from school_adviser import MealBuilder

    meals = await MealBuilder("J10", "7530045").with_date("20230825").build()
"""

__version__ = "0.3.0"

from school_adviser.builders import (  # noqa: E402
    AcademyBuilder,
    ElementarySchoolTimetableBuilder,
    HighSchoolTimetableBuilder,
    MealBuilder,
    MiddleSchoolTimetableBuilder,
    SchoolBuilder,
)
from school_adviser.logging_config import configure_logging  # noqa: E402
from school_adviser.services.neis_api_service import (  # noqa: E402
    NEISAPIError,
    NEISAPIService,
)
from school_adviser.utils.date import get_date  # noqa: E402

__all__ = [
    "AcademyBuilder",
    "ElementarySchoolTimetableBuilder",
    "HighSchoolTimetableBuilder",
    "MealBuilder",
    "MiddleSchoolTimetableBuilder",
    "NEISAPIError",
    "NEISAPIService",
    "SchoolBuilder",
    "configure_logging",
    "get_date",
]
