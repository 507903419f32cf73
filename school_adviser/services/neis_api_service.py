"""
NEIS API 클라이언트 서비스
교육정보 개방 포털(open.neis.go.kr)과의 HTTP 통신 처리
"""

from typing import Any

import httpx
import structlog

from school_adviser import __version__
from school_adviser.config import settings

logger = structlog.get_logger()


def build_url(
    endpoint: str,
    params: dict[str, Any] | None = None,
    *,
    base_url: str | None = None,
    api_key: str | None = None,
    response_type: str | None = None,
) -> str:
    """
    요청 URL 생성

    KEY와 Type이 먼저 오고 나머지 파라미터가 순서대로 붙는다.
    값이 None이거나 빈 문자열인 파라미터는 생략한다.

    Args:
        endpoint: API 리소스 이름 (예: "schoolInfo")
        params: 쿼리 파라미터
        base_url: 기본값 settings.neis_api_base_url
        api_key: 기본값 settings.api_key
        response_type: 기본값 settings.neis_api_type

    Returns:
        퍼센트 인코딩된 URL 문자열
    """
    base_url = (base_url or settings.neis_api_base_url).rstrip("/")
    api_key = api_key if api_key is not None else settings.api_key

    query: dict[str, Any] = {}

    # 인증키는 설정된 경우에만 추가 (None 전송 방지)
    if api_key:
        query["KEY"] = api_key
    query["Type"] = response_type or settings.neis_api_type

    for name, value in (params or {}).items():
        if value is None or value == "":
            continue
        query[name] = value

    return str(httpx.URL(f"{base_url}/{endpoint}", params=query))


class NEISAPIError(Exception):
    """NEIS API 관련 오류"""

    pass


class NEISAPIService:
    """NEIS API 통신 서비스"""

    def __init__(self, client: httpx.AsyncClient | None = None):
        self.base_url = settings.neis_api_base_url.rstrip("/")
        self.api_key = settings.api_key
        self.response_type = settings.neis_api_type

        # HTTP 클라이언트 설정 (타임아웃은 httpx 기본값 사용)
        self.client = client or httpx.AsyncClient(
            headers={
                "Accept": "application/json",
                "User-Agent": f"school-adviser/{__version__}",
            }
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """클라이언트 종료"""
        await self.client.aclose()

    def build_url(self, endpoint: str, params: dict[str, Any] | None = None) -> str:
        """이 서비스의 설정으로 요청 URL 생성"""
        return build_url(
            endpoint,
            params,
            base_url=self.base_url,
            api_key=self.api_key or "",
            response_type=self.response_type,
        )

    async def get_json(self, url: str) -> dict[str, Any]:
        """
        NEIS API GET 요청 실행

        Args:
            url: build_url로 만든 요청 URL

        Returns:
            API 응답 JSON

        Raises:
            NEISAPIError: 연결 실패, 2xx 이외의 상태 코드, JSON 파싱 실패
        """
        endpoint = httpx.URL(url).path.rsplit("/", 1)[-1]

        try:
            response = await self.client.get(url)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "NEIS API HTTP error",
                endpoint=endpoint,
                status_code=e.response.status_code,
            )
            raise NEISAPIError(f"HTTP {e.response.status_code} from {endpoint}") from e

        except httpx.HTTPError as e:
            logger.error("NEIS API connection error", endpoint=endpoint, error=str(e))
            raise NEISAPIError(f"Connection error: {e}") from e

        except ValueError as e:
            logger.error("NEIS API returned invalid JSON", endpoint=endpoint, error=str(e))
            raise NEISAPIError(f"Invalid JSON from {endpoint}") from e
