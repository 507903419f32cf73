from school_adviser.builders.base import NEISBuilder
from school_adviser.builders.resources import SCHOOL
from school_adviser.services.neis_api_service import NEISAPIService


class SchoolBuilder(NEISBuilder):
    """
    학교기본정보(schoolInfo) 빌더

    Example:
        schools = await (
            SchoolBuilder()
            .with_sc_code("J10")
            .with_school_name("경기과학고등학교")
            .build()
        )
    """

    resource = SCHOOL

    def __init__(self, service: NEISAPIService | None = None):
        super().__init__(service)

    def with_sc_code(self, sc_code: str) -> "SchoolBuilder":
        """시도교육청코드 (예: 'J10')"""
        return self._set("sc_code", sc_code)

    def with_school_code(self, school_code: str) -> "SchoolBuilder":
        """표준학교코드 (예: '7530045')"""
        return self._set("school_code", school_code)

    def with_school_name(self, school_name: str) -> "SchoolBuilder":
        """학교명 (예: '경기과학고등학교')"""
        return self._set("school_name", school_name)

    def with_school_type(self, school_type: str) -> "SchoolBuilder":
        """학교종류명 (예: '고등학교')"""
        return self._set("school_type", school_type)

    def with_location(self, location: str) -> "SchoolBuilder":
        """소재지명 (예: '경기도')"""
        return self._set("location", location)

    def with_foundation(self, foundation: str) -> "SchoolBuilder":
        """설립명 (예: '공립')"""
        return self._set("foundation", foundation)
