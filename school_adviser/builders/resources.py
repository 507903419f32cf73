"""
NEIS 리소스 정의
리소스마다 필터 테이블(필터 이름 -> 쿼리 파라미터)과 변환 규칙 테이블(필드 -> 규칙)을 둔다
"""

from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import BaseModel

from school_adviser.models import (
    AcademyInfo,
    ElementarySchoolTimetable,
    HighSchoolTimetable,
    MealInfo,
    MiddleSchoolTimetable,
    SchoolInfo,
)
from school_adviser.utils.date import get_date
from school_adviser.utils.field_mapping import (
    Rule,
    pair_list,
    parse_flag,
    parse_float,
    parse_int,
    split_lines,
    strip_prefix,
)


@dataclass(frozen=True)
class NEISResource:
    endpoint: str
    label: str
    filters: Mapping[str, str]
    rules: Mapping[str, Rule]
    model: type[BaseModel]
    # "해당하는 데이터가 없습니다"(INFO-200)를 빈 목록으로 처리할지 여부
    empty_on_no_data: bool = False

    @property
    def error_message(self) -> str:
        return f"Cannot find {self.label} with given info"


PAGING_FILTERS = {
    "page": "pIndex",
    "page_size": "pSize",
}

TIMETABLE_FILTERS = {
    "sc_code": "ATPT_OFCDC_SC_CODE",
    "school_code": "SD_SCHUL_CODE",
    "year": "AY",
    "semester": "SEM",
    "date": "ALL_TI_YMD",
    "grade": "GRADE",
    "class_name": "CLASS_NM",
    "period": "PERIO",
    "from_date": "TI_FROM_YMD",
    "to_date": "TI_TO_YMD",
}

TIMETABLE_RULES = {
    "ALL_TI_YMD": get_date,
    "LOAD_DTM": get_date,
}


SCHOOL = NEISResource(
    endpoint="schoolInfo",
    label="school",
    filters={
        "sc_code": "ATPT_OFCDC_SC_CODE",
        "school_code": "SD_SCHUL_CODE",
        "school_name": "SCHUL_NM",
        "school_type": "SCHUL_KND_SC_NM",
        "location": "LCTN_SC_NM",
        "foundation": "FOND_SC_NM",
        **PAGING_FILTERS,
    },
    rules={
        "INDST_SPECL_CCCCL_EXST_YN": parse_flag,
        "FOND_YMD": get_date,
        "FOAS_MEMRD": get_date,
        "LOAD_DTM": get_date,
    },
    model=SchoolInfo,
)

MEAL = NEISResource(
    endpoint="mealServiceDietInfo",
    label="meal",
    filters={
        "sc_code": "ATPT_OFCDC_SC_CODE",
        "school_code": "SD_SCHUL_CODE",
        "meal_code": "MMEAL_SC_CODE",
        "date": "MLSV_YMD",
        "from_date": "MLSV_FROM_YMD",
        "to_date": "MLSV_TO_YMD",
        **PAGING_FILTERS,
    },
    rules={
        "MLSV_YMD": get_date,
        "MLSV_FROM_YMD": get_date,
        "MLSV_TO_YMD": get_date,
        "LOAD_DTM": get_date,
        "DDISH_NM": split_lines,
        "ORPLC_INFO": pair_list("type", "origin"),
        "NTR_INFO": pair_list("nutrient", "amount", parse_float),
    },
    model=MealInfo,
)

ACADEMY = NEISResource(
    endpoint="acaInsTiInfo",
    label="academy",
    filters={
        "sc_code": "ATPT_OFCDC_SC_CODE",
        "zone_name": "ADMST_ZONE_NM",
        "academy_number": "ACA_ASNUM",
        "academy_name": "ACA_NM",
        "realm": "REALM_SC_NM",
        "learning_field": "LE_ORD_NM",
        "course": "LE_CRSE_NM",
        **PAGING_FILTERS,
    },
    rules={
        "THCC_OTHBC_YN": parse_flag,
        "ESTBL_YMD": get_date,
        "REG_YMD": get_date,
        # 상세주소가 ", "로 시작하는 원천 데이터 오류 보정
        "FA_RDNDA": strip_prefix(", "),
        # 수강료 항목은 <br/>이 아니라 ","로 구분된다
        "PSNBY_THCC_CNTNT": pair_list("name", "price", parse_int, separator=","),
        "BRHS_ACA_YN": parse_flag,
        "LOAD_DTM": get_date,
    },
    model=AcademyInfo,
)

ELEMENTARY_SCHOOL_TIMETABLE = NEISResource(
    endpoint="elsTimetable",
    label="elementary school timetable",
    filters={**TIMETABLE_FILTERS, **PAGING_FILTERS},
    rules=TIMETABLE_RULES,
    model=ElementarySchoolTimetable,
    empty_on_no_data=True,
)

MIDDLE_SCHOOL_TIMETABLE = NEISResource(
    endpoint="misTimetable",
    label="middle school timetable",
    filters={
        **TIMETABLE_FILTERS,
        "day_night_course": "DGHT_CRSE_SC_NM",
        **PAGING_FILTERS,
    },
    rules={
        **TIMETABLE_RULES,
        "ITRT_CNTNT": strip_prefix("-"),
    },
    model=MiddleSchoolTimetable,
)

HIGH_SCHOOL_TIMETABLE = NEISResource(
    endpoint="hisTimetable",
    label="high school timetable",
    filters={
        **TIMETABLE_FILTERS,
        "day_night_course": "DGHT_CRSE_SC_NM",
        "realm": "ORD_SC_NM",
        "department": "DEPT_NM",
        "classroom": "CLRM_NM",
        **PAGING_FILTERS,
    },
    rules=TIMETABLE_RULES,
    model=HighSchoolTimetable,
)
