from datetime import date

from pydantic import BaseModel


class NEISRow(BaseModel):
    """정규화된 NEIS row 공통 필드"""

    ATPT_OFCDC_SC_CODE: str | None = None  # 시도교육청코드
    ATPT_OFCDC_SC_NM: str | None = None  # 시도교육청명
    LOAD_DTM: date | None = None  # 수정일

    class Config:
        extra = "allow"
        coerce_numbers_to_str = True


class SchoolInfo(NEISRow):
    SD_SCHUL_CODE: str | None = None
    SCHUL_NM: str | None = None
    ENG_SCHUL_NM: str | None = None
    SCHUL_KND_SC_NM: str | None = None
    LCTN_SC_NM: str | None = None
    JU_ORG_NM: str | None = None
    FOND_SC_NM: str | None = None
    ORG_RDNZC: str | None = None
    ORG_RDNMA: str | None = None
    ORG_RDNDA: str | None = None
    ORG_TELNO: str | None = None
    HMPG_ADRES: str | None = None
    COEDU_SC_NM: str | None = None
    ORG_FAXNO: str | None = None
    HS_SC_NM: str | None = None
    INDST_SPECL_CCCCL_EXST_YN: bool | None = None  # 산업체특별학급유무
    HS_GNRL_BUSNS_SC_NM: str | None = None
    SPCLY_PURPS_HS_ORD_NM: str | None = None
    ENE_BFE_SEHF_SC_NM: str | None = None
    DGHT_SC_NM: str | None = None
    FOND_YMD: date | None = None  # 설립일자
    FOAS_MEMRD: date | None = None  # 개교기념일

    class Config:
        json_schema_extra = {
            "example": {
                "ATPT_OFCDC_SC_CODE": "J10",
                "SD_SCHUL_CODE": "7530045",
                "SCHUL_NM": "경기과학고등학교",
                "SCHUL_KND_SC_NM": "고등학교",
                "INDST_SPECL_CCCCL_EXST_YN": False,
                "FOND_YMD": "1983-01-01",
            }
        }


class DishOrigin(BaseModel):
    type: str
    origin: str | None = None


class DishNutrient(BaseModel):
    nutrient: str
    amount: float | None = None


class MealInfo(NEISRow):
    SD_SCHUL_CODE: str | None = None
    SCHUL_NM: str | None = None
    MMEAL_SC_CODE: str | None = None  # 식사코드
    MMEAL_SC_NM: str | None = None  # 식사명
    MLSV_YMD: date | None = None  # 급식일자
    MLSV_FGR: float | None = None  # 급식인원수
    DDISH_NM: list[str] = []
    ORPLC_INFO: list[DishOrigin] = []
    CAL_INFO: str | None = None
    NTR_INFO: list[DishNutrient] = []
    MLSV_FROM_YMD: date | None = None
    MLSV_TO_YMD: date | None = None


class TuitionFee(BaseModel):
    name: str
    price: int | None = None


class AcademyInfo(NEISRow):
    ADMST_ZONE_NM: str | None = None  # 행정구역명
    ACA_INSTI_SC_NM: str | None = None  # 학원교습소명
    ACA_ASNUM: str | None = None  # 학원지정번호
    ACA_NM: str | None = None  # 학원명
    ESTBL_YMD: date | None = None  # 개설일자
    REG_YMD: date | None = None  # 등록일자
    REG_STTUS_NM: str | None = None
    CAA_BEGIN_YMD: str | None = None
    CAA_END_YMD: str | None = None
    TOFOR_SMTOT: int | None = None  # 정원합계
    DTM_RCPTN_ABLTY_NMPR_SMTOT: int | None = None
    REALM_SC_NM: str | None = None
    LE_ORD_NM: str | None = None
    LE_CRSE_LIST_NM: str | None = None
    LE_CRSE_NM: str | None = None
    PSNBY_THCC_CNTNT: list[TuitionFee] = []  # 인당수강료내용
    THCC_OTHBC_YN: bool | None = None  # 수강료공개여부
    BRHS_ACA_YN: bool | None = None  # 기숙사학원여부
    FA_RDNZC: str | None = None
    FA_RDNMA: str | None = None
    FA_RDNDA: str | None = None  # 도로명상세주소


class TimetableRow(NEISRow):
    SD_SCHUL_CODE: str | None = None
    SCHUL_NM: str | None = None
    AY: str | None = None  # 학년도
    SEM: str | None = None  # 학기
    ALL_TI_YMD: date | None = None  # 시간표일자
    GRADE: str | None = None
    CLASS_NM: str | None = None
    PERIO: str | None = None  # 교시
    ITRT_CNTNT: str | None = None  # 수업내용


class ElementarySchoolTimetable(TimetableRow):
    pass


class MiddleSchoolTimetable(TimetableRow):
    DGHT_CRSE_SC_NM: str | None = None  # 주야과정명


class HighSchoolTimetable(MiddleSchoolTimetable):
    ORD_SC_NM: str | None = None  # 계열명
    DDDEP_NM: str | None = None  # 학과명
    CLRM_NM: str | None = None  # 강의실명

