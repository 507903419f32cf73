"""
NEIS 빌더 공통 구현
필터를 모아 URL을 만들고, 한 번 요청한 뒤 row를 정규화한다
"""

from collections.abc import Mapping
from typing import Any, Self

import structlog
from pydantic import ValidationError

from school_adviser.adapters.neis_response_adapter import NEISResponseAdapter
from school_adviser.builders.resources import NEISResource
from school_adviser.services.neis_api_service import (
    NEISAPIError,
    NEISAPIService,
    build_url,
)
from school_adviser.utils.field_mapping import normalize_rows

logger = structlog.get_logger()


class NEISBuilder:
    """리소스 정의(NEISResource)로 동작하는 범용 빌더"""

    resource: NEISResource

    def __init__(self, service: NEISAPIService | None = None, **codes: Any):
        self._service = service
        self._filters: dict[str, Any] = {}
        self._set_many(codes)

    def _set(self, name: str, value: Any) -> Self:
        if name not in self.resource.filters:
            available = ", ".join(self.resource.filters)
            raise ValueError(
                f"Unknown filter '{name}' for {self.resource.endpoint}. Available: {available}"
            )
        self._filters[name] = value
        return self

    def _set_many(self, params: Mapping[str, Any]) -> Self:
        for name, value in params.items():
            if name == "between":
                if value is not None:
                    self.with_between(*value)
            else:
                self._set(name, value)
        return self

    def with_params(self, params: Mapping[str, Any] | None = None, **filters: Any) -> Self:
        """
        여러 필터를 한 번에 설정

        전달한 키만 바뀌고 나머지 필터는 그대로 유지된다.
        기간 필터가 있는 리소스는 between=(시작일, 종료일)도 받는다.

        Args:
            params: 필터 이름 -> 값
            **filters: 필터 이름 -> 값

        Raises:
            ValueError: 리소스에 없는 필터 이름인 경우
        """
        merged = {**(params or {}), **filters}
        return self._set_many(merged)

    def with_page(self, page: int) -> Self:
        """페이지 위치 설정 (pIndex)"""
        return self._set("page", page)

    def with_page_size(self, page_size: int) -> Self:
        """페이지 당 신청 숫자 설정 (pSize)"""
        return self._set("page_size", page_size)

    def with_between(self, from_date: str, to_date: str) -> Self:
        """시작일자와 종료일자를 한 번에 설정"""
        self._set("from_date", from_date)
        return self._set("to_date", to_date)

    @property
    def filters(self) -> dict[str, Any]:
        """현재 설정된 필터 (복사본)"""
        return dict(self._filters)

    def query_params(self) -> dict[str, Any]:
        """필터 테이블 순서대로 NEIS 쿼리 파라미터를 만든다."""
        return {
            param: self._filters[name]
            for name, param in self.resource.filters.items()
            if self._filters.get(name) not in (None, "")
        }

    def url(self) -> str:
        """API 요청 URL 반환"""
        if self._service is not None:
            return self._service.build_url(self.resource.endpoint, self.query_params())
        return build_url(self.resource.endpoint, self.query_params())

    async def build(self) -> list[dict[str, Any]]:
        """
        설정한 필터로 API를 한 번 호출하고 정규화된 row 목록을 반환

        Returns:
            정규화된 row 리스트

        Raises:
            NEISAPIError: 요청 실패, 응답 구조 이상, 값 변환 실패
        """
        resource = self.resource
        service = self._service or NEISAPIService()

        try:
            payload = await service.get_json(self.url())

            if resource.empty_on_no_data and NEISResponseAdapter.is_no_data(payload):
                logger.info("NEIS API returned no data", endpoint=resource.endpoint)
                return []

            rows = NEISResponseAdapter.extract_rows(payload, resource.endpoint)
            return normalize_rows(rows, resource.rules)

        except (NEISAPIError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(
                "Failed to build NEIS rows",
                endpoint=resource.endpoint,
                error=str(e),
            )
            raise NEISAPIError(resource.error_message) from e

        finally:
            if self._service is None:
                await service.close()

    async def build_models(self) -> list[Any]:
        """build() 결과를 리소스 모델로 검증해서 반환"""
        rows = await self.build()
        try:
            return [self.resource.model.model_validate(row) for row in rows]
        except ValidationError as e:
            logger.error(
                "NEIS row failed model validation",
                endpoint=self.resource.endpoint,
                error=str(e),
            )
            raise NEISAPIError(self.resource.error_message) from e
