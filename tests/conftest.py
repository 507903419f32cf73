"""
pytest configuration and fixtures for school_adviser tests
"""

import httpx
import pytest

from school_adviser.config import settings
from school_adviser.services.neis_api_service import NEISAPIService


class DummyResponse:
    def __init__(self, json_data=None, status_code=200, url="https://open.neis.go.kr/hub/"):
        self._json = json_data
        self.status_code = status_code
        self.request = httpx.Request("GET", url)
        self._resp = httpx.Response(status_code, request=self.request, text="")

    def json(self):
        if isinstance(self._json, Exception):
            raise self._json
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise httpx.HTTPStatusError(
                "error", request=self.request, response=self._resp
            )


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Test-specific settings on the global singleton"""
    monkeypatch.setattr(settings, "api_key", "test-neis-key")
    monkeypatch.setattr(settings, "neis_api_base_url", "https://open.neis.go.kr/hub")
    monkeypatch.setattr(settings, "neis_api_type", "json")
    return settings


@pytest.fixture
def fake_service(monkeypatch):
    """
    NEISAPIService whose client.get returns the given payload.

    Usage: svc = fake_service({...}) / fake_service(httpx.ConnectError("boom"))
    Requested URLs are collected on svc.requested_urls.
    """

    def factory(payload=None, status_code=200):
        svc = NEISAPIService()
        svc.requested_urls = []

        async def fake_get(url):
            svc.requested_urls.append(url)
            if isinstance(payload, httpx.HTTPError):
                raise payload
            return DummyResponse(payload, status_code=status_code, url=url)

        monkeypatch.setattr(svc.client, "get", fake_get)
        return svc

    return factory


def neis_envelope(endpoint, rows, code="INFO-000"):
    return {
        endpoint: [
            {
                "head": [
                    {"list_total_count": len(rows)},
                    {"RESULT": {"CODE": code, "MESSAGE": "정상 처리되었습니다."}},
                ]
            },
            {"row": rows},
        ]
    }


NO_DATA_RESPONSE = {"RESULT": {"CODE": "INFO-200", "MESSAGE": "해당하는 데이터가 없습니다."}}


@pytest.fixture
def envelope():
    return neis_envelope


@pytest.fixture
def no_data_response():
    return dict(NO_DATA_RESPONSE)


@pytest.fixture
def school_row():
    return {
        "ATPT_OFCDC_SC_CODE": "J10",
        "ATPT_OFCDC_SC_NM": "경기도교육청",
        "SD_SCHUL_CODE": "7530045",
        "SCHUL_NM": "경기과학고등학교",
        "SCHUL_KND_SC_NM": "고등학교",
        "LCTN_SC_NM": "경기도",
        "FOND_SC_NM": "공립",
        "ORG_RDNDA": "/ (송죽동)",
        "INDST_SPECL_CCCCL_EXST_YN": "N",
        "FOND_YMD": "19830301",
        "FOAS_MEMRD": "19830301",
        "LOAD_DTM": "20230627",
    }


@pytest.fixture
def meal_row():
    return {
        "ATPT_OFCDC_SC_CODE": "J10",
        "ATPT_OFCDC_SC_NM": "경기도교육청",
        "SD_SCHUL_CODE": "7530045",
        "SCHUL_NM": "경기과학고등학교",
        "MMEAL_SC_CODE": "2",
        "MMEAL_SC_NM": "중식",
        "MLSV_YMD": "20230825",
        "MLSV_FGR": 379.0,
        "DDISH_NM": "쌀밥(자율)<br/>중국식냉면(주식)",
        "ORPLC_INFO": "쌀 : 국내산<br/>쇠고기(종류) : 국내산(한우)",
        "CAL_INFO": "436.9 Kcal",
        "NTR_INFO": "탄수화물(g): 60.6<br/>단백질(g): 10.2",
        "MLSV_FROM_YMD": "20230825",
        "MLSV_TO_YMD": "20230825",
    }


@pytest.fixture
def academy_row():
    return {
        "ATPT_OFCDC_SC_CODE": "J10",
        "ATPT_OFCDC_SC_NM": "경기도교육청",
        "ADMST_ZONE_NM": "가평군",
        "ACA_INSTI_SC_NM": "교습소",
        "ACA_ASNUM": "3000055155",
        "ACA_NM": "가평필아트미술교습소",
        "ESTBL_YMD": "20150303",
        "REG_YMD": "20150303",
        "REG_STTUS_NM": "개원",
        "CAA_BEGIN_YMD": None,
        "CAA_END_YMD": "99991231",
        "TOFOR_SMTOT": 49,
        "DTM_RCPTN_ABLTY_NMPR_SMTOT": 8,
        "REALM_SC_NM": "예능(대)",
        "LE_ORD_NM": "예능(중)",
        "LE_CRSE_LIST_NM": "미술",
        "LE_CRSE_NM": "미술",
        "PSNBY_THCC_CNTNT": "미술1:110000,미술2:130000",
        "THCC_OTHBC_YN": "Y",
        "BRHS_ACA_YN": "N",
        "FA_RDNZC": "12417",
        "FA_RDNMA": "경기도 가평군 가평읍 석봉로 163",
        "FA_RDNDA": ", 102호 (가평읍)",
        "LOAD_DTM": "20230627",
    }


@pytest.fixture
def timetable_row():
    return {
        "ATPT_OFCDC_SC_CODE": "J10",
        "ATPT_OFCDC_SC_NM": "경기도교육청",
        "SD_SCHUL_CODE": "7581030",
        "SCHUL_NM": "가평중학교",
        "AY": "2023",
        "SEM": "1",
        "ALL_TI_YMD": "20230315",
        "GRADE": "1",
        "CLASS_NM": "1",
        "PERIO": "1",
        "ITRT_CNTNT": "-국어",
        "LOAD_DTM": "20230316",
    }
