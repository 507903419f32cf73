"""
NEIS API 응답 어댑터
NEIS 응답 봉투(envelope) 구조를 읽어 비즈니스 로직에서 분리
"""

from typing import Any

import structlog

logger = structlog.get_logger()

# 해당하는 데이터가 없습니다
NO_DATA_CODE = "INFO-200"


class NEISResponseAdapter:
    """NEIS API 응답에서 행(row)과 결과 코드를 꺼내는 어댑터"""

    @staticmethod
    def extract_rows(api_response: dict[str, Any], endpoint: str) -> list[dict[str, Any]]:
        """
        NEIS API 응답에서 row 목록 추출

        NEIS 표준 응답 구조: {endpoint: [{"head": [...]}, {"row": [...]}]}

        Args:
            api_response: NEIS API 원본 응답
            endpoint: 리소스 이름 (예: "schoolInfo")

        Returns:
            row 리스트

        Raises:
            KeyError, IndexError, TypeError: 응답에 row가 없거나 row 형식이 잘못된 경우
        """
        rows = api_response[endpoint][1]["row"]
        if not isinstance(rows, list):
            raise TypeError(f"Expected a row list for '{endpoint}', got {type(rows).__name__}")
        for row in rows:
            if not isinstance(row, dict):
                raise TypeError(f"Expected dict rows for '{endpoint}', got {type(row).__name__}")
        return rows

    @staticmethod
    def _find_result(api_response: dict[str, Any], endpoint: str | None) -> dict[str, Any]:
        # 데이터가 없거나 오류인 경우 최상위에 RESULT가 온다
        if isinstance(api_response, dict) and isinstance(api_response.get("RESULT"), dict):
            return api_response["RESULT"]

        if not endpoint:
            return {}

        try:
            for part in api_response[endpoint][0]["head"]:
                if isinstance(part, dict) and "RESULT" in part:
                    return part["RESULT"]
        except (KeyError, IndexError, TypeError):
            logger.debug("NEIS response has no head section", endpoint=endpoint)

        return {}

    @staticmethod
    def get_result_code(api_response: dict[str, Any], endpoint: str | None = None) -> str | None:
        """
        RESULT.CODE 추출

        Args:
            api_response: NEIS API 응답
            endpoint: 리소스 이름 (head 안의 RESULT를 찾을 때 사용)

        Returns:
            결과 코드 또는 None
        """
        return NEISResponseAdapter._find_result(api_response, endpoint).get("CODE")

    @staticmethod
    def get_result_message(api_response: dict[str, Any], endpoint: str | None = None) -> str:
        """RESULT.MESSAGE 추출"""
        if not api_response:
            return "Empty API response"
        return NEISResponseAdapter._find_result(api_response, endpoint).get(
            "MESSAGE", "Unknown result"
        )

    @staticmethod
    def is_no_data(api_response: dict[str, Any]) -> bool:
        """'해당하는 데이터가 없습니다' 응답인지 확인"""
        return NEISResponseAdapter.get_result_code(api_response) == NO_DATA_CODE

    @staticmethod
    def get_total_count(api_response: dict[str, Any], endpoint: str) -> int:
        """
        head의 list_total_count 추출

        Args:
            api_response: NEIS API 응답
            endpoint: 리소스 이름

        Returns:
            전체 건수 (없으면 0)
        """
        try:
            for part in api_response[endpoint][0]["head"]:
                if isinstance(part, dict) and "list_total_count" in part:
                    return int(part["list_total_count"])
        except (KeyError, IndexError, TypeError, ValueError):
            pass
        return 0
