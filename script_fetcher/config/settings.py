"""
설정 관리 모듈

환경 변수를 통한 스크립트 페처 설정을 관리합니다.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from ..exceptions import ConfigurationException


class Settings(BaseSettings):
    """스크립트 페처 설정 관리 클래스"""

    # 메타데이터 서버 설정
    metadata_url: str = Field(
        default="http://metadata.google.internal/computeMetadata/v1",
        description="메타데이터 서버 기본 URL"
    )
    metadata_timeout: int = Field(
        default=5,
        description="메타데이터 조회 타임아웃 (초)"
    )

    # HTTP 다운로드 설정
    http_timeout: int = Field(
        default=10,
        description="HTTP 다운로드 시도당 타임아웃 (초)"
    )
    http_max_attempts: int = Field(
        default=10,
        description="HTTP 다운로드 최대 시도 횟수"
    )
    http_retry_delay: float = Field(
        default=1.0,
        description="HTTP 다운로드 재시도 간격 (초)"
    )

    # 오브젝트 스토리지 클라이언트 설정
    gsutil_command: str = Field(
        default="gsutil",
        description="오브젝트 스토리지 클라이언트 실행 파일"
    )

    # 로깅 설정
    log_level: str = Field(
        default="INFO",
        description="로그 레벨"
    )
    log_format: str = Field(
        default="%(asctime)s %(name)s: %(message)s",
        description="로그 포맷"
    )
    log_file: str = Field(
        default="/var/log/startupscript.log",
        description="로그 파일 경로"
    )
    syslog_enabled: bool = Field(
        default=True,
        description="syslog 전달 여부"
    )
    syslog_address: str = Field(
        default="/dev/log",
        description="syslog 소켓 경로"
    )
    syslog_tag: str = Field(
        default="startupscript",
        description="syslog 식별 태그"
    )
    console_logging: bool = Field(
        default=False,
        description="콘솔 로그 출력 여부"
    )

    class Config:
        env_prefix = "SCRIPT_FETCHER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def validate_configuration(self) -> None:
        """설정 유효성 검증"""
        if not self.metadata_url.startswith(("http://", "https://")):
            raise ConfigurationException(
                "METADATA_URL", "http(s) URL이어야 합니다"
            )

        if self.metadata_timeout <= 0:
            raise ConfigurationException(
                "METADATA_TIMEOUT", "0보다 커야 합니다"
            )

        if self.http_timeout <= 0:
            raise ConfigurationException(
                "HTTP_TIMEOUT", "0보다 커야 합니다"
            )

        if self.http_max_attempts < 1:
            raise ConfigurationException(
                "HTTP_MAX_ATTEMPTS", "1 이상이어야 합니다"
            )

        if self.http_retry_delay < 0:
            raise ConfigurationException(
                "HTTP_RETRY_DELAY", "음수일 수 없습니다"
            )

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationException(
                "LOG_LEVEL", f"알 수 없는 로그 레벨입니다: {self.log_level}"
            )

        if self.syslog_enabled and not self.syslog_tag.strip():
            raise ConfigurationException(
                "SYSLOG_TAG", "syslog 사용 시 필요합니다"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    설정 인스턴스를 반환합니다 (싱글톤 패턴)

    Returns:
        Settings: 설정 인스턴스
    """
    settings = Settings()
    settings.validate_configuration()
    return settings
