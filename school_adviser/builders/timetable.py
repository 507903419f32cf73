from school_adviser.builders.base import NEISBuilder
from school_adviser.builders.resources import (
    ELEMENTARY_SCHOOL_TIMETABLE,
    HIGH_SCHOOL_TIMETABLE,
    MIDDLE_SCHOOL_TIMETABLE,
)
from school_adviser.services.neis_api_service import NEISAPIService


class TimetableBuilder(NEISBuilder):
    """초/중/고 시간표 빌더 공통 필터"""

    def __init__(self, sc_code: str, school_code: str, service: NEISAPIService | None = None):
        super().__init__(service, sc_code=sc_code, school_code=school_code)

    def with_year(self, year: str) -> "TimetableBuilder":
        """학년도 (예: '2023')"""
        return self._set("year", year)

    def with_semester(self, semester: str) -> "TimetableBuilder":
        """학기 (예: '1')"""
        return self._set("semester", semester)

    def with_date(self, date: str) -> "TimetableBuilder":
        """시간표일자 (YYYYMMDD)"""
        return self._set("date", date)

    def with_grade(self, grade: str) -> "TimetableBuilder":
        return self._set("grade", grade)

    def with_class(self, class_name: str) -> "TimetableBuilder":
        """학급명"""
        return self._set("class_name", class_name)

    def with_period(self, period: str) -> "TimetableBuilder":
        """교시"""
        return self._set("period", period)

    def with_from(self, from_date: str) -> "TimetableBuilder":
        """시간표시작일자 (YYYYMMDD)"""
        return self._set("from_date", from_date)

    def with_to(self, to_date: str) -> "TimetableBuilder":
        """시간표종료일자 (YYYYMMDD)"""
        return self._set("to_date", to_date)


class ElementarySchoolTimetableBuilder(TimetableBuilder):
    """
    초등학교시간표(elsTimetable) 빌더

    조회 결과가 없으면(INFO-200) 예외 대신 빈 목록을 반환한다.
    """

    resource = ELEMENTARY_SCHOOL_TIMETABLE


class MiddleSchoolTimetableBuilder(TimetableBuilder):
    """중학교시간표(misTimetable) 빌더"""

    resource = MIDDLE_SCHOOL_TIMETABLE

    def with_day_night_course(self, day_night_course: str) -> "MiddleSchoolTimetableBuilder":
        """주야과정명 (예: '주간')"""
        return self._set("day_night_course", day_night_course)


class HighSchoolTimetableBuilder(MiddleSchoolTimetableBuilder):
    """고등학교시간표(hisTimetable) 빌더"""

    resource = HIGH_SCHOOL_TIMETABLE

    def with_realm(self, realm: str) -> "HighSchoolTimetableBuilder":
        """계열명"""
        return self._set("realm", realm)

    def with_department(self, department: str) -> "HighSchoolTimetableBuilder":
        """학과명"""
        return self._set("department", department)

    def with_classroom(self, classroom: str) -> "HighSchoolTimetableBuilder":
        """강의실명"""
        return self._set("classroom", classroom)
