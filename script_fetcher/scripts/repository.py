"""
스크립트 전송 방식 모듈

Cloud Storage(gsutil)와 일반 HTTP(S)에서 스크립트를 내려받는 기능을 제공합니다.
모든 진단 출력은 호출자가 넘긴 임시 로그 파일(scratch log)에 기록됩니다.
"""

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

import aiohttp

from ..exceptions import ScriptDownloadException, TransientDownloadError
from ..utils.helpers import format_file_size, retry_with_backoff
from ..utils.logging import get_logger

logger = get_logger(__name__)

# curl --retry 와 같은 기준의 일시적 오류 상태 코드
TRANSIENT_HTTP_STATUSES = frozenset({408, 429, 500, 502, 503, 504})


class TransportBase(ABC):
    """전송 방식 기본 추상 클래스"""

    name = "base"

    def __init__(self, settings):
        """전송 방식 기본 초기화"""
        self.settings = settings
        self.logger = logger

    @abstractmethod
    async def download(self, source: str, target: Path, scratch_log: TextIO) -> None:
        """
        스크립트 다운로드 (추상 메서드)

        Args:
            source: 다운로드할 URL
            target: 내용을 기록할 임시 파일 경로
            scratch_log: 진단 출력을 기록할 임시 로그 파일

        Raises:
            ScriptDownloadException: 다운로드 실패 시
        """
        pass


class GsutilTransport(TransportBase):
    """gsutil 클라이언트를 이용한 Cloud Storage 전송 방식"""

    name = "gsutil"

    async def download(self, source: str, target: Path, scratch_log: TextIO) -> None:
        """gsutil cp로 gs:// 객체 다운로드"""
        cmd = [
            self.settings.gsutil_command,
            "-h", "Cache-Control:no-cache",
            "cp", source, str(target),
        ]

        # 하위 프로세스가 같은 파일에 이어서 쓰도록 버퍼를 먼저 비운다
        scratch_log.flush()

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=scratch_log,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            raise ScriptDownloadException(source, self.name, f"gsutil 실행 불가: {e}") from e

        return_code = await process.wait()
        if return_code != 0:
            raise ScriptDownloadException(source, self.name, f"종료 코드 {return_code}")

        self.logger.debug(f"gsutil 다운로드 완료: {source}")


class HttpTransport(TransportBase):
    """익명 HTTP(S) GET 전송 방식"""

    name = "http"

    def __init__(self, settings):
        """
        HTTP 전송 방식 초기화

        Args:
            settings: 시스템 설정
        """
        super().__init__(settings)
        self.timeout = aiohttp.ClientTimeout(total=settings.http_timeout)
        self.max_attempts = settings.http_max_attempts
        self.retry_delay = settings.http_retry_delay

    async def download(self, source: str, target: Path, scratch_log: TextIO) -> None:
        """재시도를 포함한 HTTP 다운로드"""
        attempts = 0

        async with aiohttp.ClientSession(timeout=self.timeout) as session:

            async def attempt() -> int:
                nonlocal attempts
                attempts += 1
                return await self._attempt(session, source, target, scratch_log, attempts)

            try:
                size = await retry_with_backoff(
                    attempt,
                    max_attempts=self.max_attempts,
                    initial_delay=self.retry_delay,
                    exceptions=(TransientDownloadError,)
                )
            except TransientDownloadError as e:
                raise ScriptDownloadException(
                    source, self.name, f"{attempts}회 시도 모두 실패: {e}"
                ) from e

        self.logger.debug(f"HTTP 다운로드 완료: {source} ({format_file_size(size)})")

    async def _attempt(
        self,
        session: aiohttp.ClientSession,
        source: str,
        target: Path,
        scratch_log: TextIO,
        attempt: int
    ) -> int:
        """한 번의 GET 시도, 기록한 바이트 수 반환"""
        try:
            async with session.get(source) as response:
                if response.status in TRANSIENT_HTTP_STATUSES:
                    scratch_log.write(f"시도 {attempt}/{self.max_attempts}: HTTP {response.status}\n")
                    raise TransientDownloadError(f"HTTP {response.status}")

                if not 200 <= response.status < 300:
                    scratch_log.write(f"시도 {attempt}/{self.max_attempts}: HTTP {response.status}\n")
                    raise ScriptDownloadException(source, self.name, f"HTTP {response.status}")

                content = await response.read()

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            detail = str(e) or type(e).__name__
            scratch_log.write(f"시도 {attempt}/{self.max_attempts}: {detail}\n")
            raise TransientDownloadError(detail) from e

        target.write_bytes(content)
        return len(content)
