"""
열거형 정의 모듈

스크립트 페처에서 사용되는 상수 값들을 열거형으로 정의합니다.
"""

from enum import Enum


class ScriptKind(Enum):
    """스크립트 종류 열거형"""
    STARTUP = "startup"
    SHUTDOWN = "shutdown"

    @property
    def url_attribute(self) -> str:
        """스크립트 URL을 담는 메타데이터 키"""
        return f"{self.value}-script-url"

    @property
    def inline_attribute(self) -> str:
        """인라인 스크립트를 담는 메타데이터 키"""
        return f"{self.value}-script"


class UrlKind(Enum):
    """스크립트 URL 분류 열거형"""
    DIRECT_SCHEME = "direct_scheme"
    VIRTUAL_HOSTED = "virtual_hosted"
    PATH_STYLE = "path_style"
    GENERIC = "generic"


class FetchStatus(Enum):
    """스크립트 가져오기 결과 상태 열거형"""
    INSTALLED = "installed"
    NOT_CONFIGURED = "not_configured"
    DOWNLOAD_FAILED = "download_failed"
