"""
예외 클래스 정의 모듈

스크립트 페처에서 사용되는 커스텀 예외들을 정의합니다.
"""

from typing import Optional


class ScriptFetcherException(Exception):
    """스크립트 페처 기본 예외 클래스"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        예외 초기화

        Args:
            message: 오류 메시지
            error_code: 오류 코드 (선택사항)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationException(ScriptFetcherException):
    """설정 오류 시 발생하는 예외"""

    def __init__(self, config_key: str, error_detail: str):
        """
        설정 예외 초기화

        Args:
            config_key: 설정 키
            error_detail: 오류 상세 정보
        """
        message = f"설정 오류: {config_key} - {error_detail}"
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key
        self.error_detail = error_detail


class ScriptDownloadException(ScriptFetcherException):
    """스크립트 다운로드 실패 시 발생하는 예외"""

    def __init__(self, url: str, transport: str, error_detail: str):
        """
        다운로드 예외 초기화

        Args:
            url: 다운로드 대상 URL
            transport: 사용한 전송 방식 (gsutil, http)
            error_detail: 오류 상세 정보
        """
        message = f"스크립트 다운로드 실패 ({transport}): {url} - {error_detail}"
        super().__init__(message, "SCRIPT_DOWNLOAD_ERROR")
        self.url = url
        self.transport = transport
        self.error_detail = error_detail


class TransientDownloadError(ScriptFetcherException):
    """재시도 대상인 일시적 다운로드 오류 (연결 오류, 시간 초과, 일시적 HTTP 상태)"""

    def __init__(self, error_detail: str):
        """
        일시적 오류 초기화

        Args:
            error_detail: 오류 상세 정보 (예: "HTTP 503")
        """
        super().__init__(error_detail, "TRANSIENT_DOWNLOAD_ERROR")
        self.error_detail = error_detail
