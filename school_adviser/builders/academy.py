from school_adviser.builders.base import NEISBuilder
from school_adviser.builders.resources import ACADEMY
from school_adviser.services.neis_api_service import NEISAPIService


class AcademyBuilder(NEISBuilder):
    """
    학원교습소정보(acaInsTiInfo) 빌더

    Example:
        academies = await (
            AcademyBuilder("J10")
            .with_zone_name("가평군")
            .with_page_size(100)
            .build()
        )
    """

    resource = ACADEMY

    def __init__(self, sc_code: str, service: NEISAPIService | None = None):
        super().__init__(service, sc_code=sc_code)

    def with_zone_name(self, zone_name: str) -> "AcademyBuilder":
        """행정구역명 (예: '가평군')"""
        return self._set("zone_name", zone_name)

    def with_academy_number(self, academy_number: str) -> "AcademyBuilder":
        """학원지정번호 (예: '3000055155')"""
        return self._set("academy_number", academy_number)

    def with_academy_name(self, academy_name: str) -> "AcademyBuilder":
        """학원명"""
        return self._set("academy_name", academy_name)

    def with_realm(self, realm: str) -> "AcademyBuilder":
        """분야명 (예: '예능(대)')"""
        return self._set("realm", realm)

    def with_learning_field(self, learning_field: str) -> "AcademyBuilder":
        """교습계열명 (예: '예능(중)')"""
        return self._set("learning_field", learning_field)

    def with_course(self, course: str) -> "AcademyBuilder":
        """교습과정명 (예: '미술')"""
        return self._set("course", course)
