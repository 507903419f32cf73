"""
NEIS 클라이언트 설정 관리
환경 변수(.env 포함)에서 API 키와 로깅 설정을 읽는다
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """클라이언트 설정"""

    # NEIS API
    api_key: str | None = Field(default=None, description="환경변수: API_KEY")
    neis_api_base_url: str = "https://open.neis.go.kr/hub"
    neis_api_type: str = "json"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # 추가 필드 무시


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤 인스턴스 반환"""
    return Settings()


# 전역 설정 인스턴스
settings = get_settings()
