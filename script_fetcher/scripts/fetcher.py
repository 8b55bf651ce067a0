"""
스크립트 페처 오케스트레이터 모듈

메타데이터에서 시작/종료 스크립트를 찾아 실행 가능한 파일로 저장합니다.
우선순위는 스크립트 URL, 인라인 스크립트 순이며 둘 다 없으면
진단을 위해 전체 메타데이터를 로그에 남깁니다.
"""

from pathlib import Path
from typing import Optional, Union

from ..config.settings import Settings
from ..models.base import FetchResult, ScriptRequest
from ..models.enums import FetchStatus, ScriptKind
from ..utils.helpers import ensure_directory, set_owner_only_executable
from ..utils.logging import get_logger
from .downloader import UrlDownloader
from .metadata import MetadataReader

logger = get_logger(__name__)

INLINE_SOURCE = "inline"


class ScriptFetcher:
    """스크립트 페처"""

    def __init__(
        self,
        settings: Settings,
        metadata_reader: Optional[MetadataReader] = None,
        downloader: Optional[UrlDownloader] = None
    ):
        """
        스크립트 페처 초기화

        Args:
            settings: 시스템 설정
            metadata_reader: 메타데이터 조회기 (None이면 설정으로 생성)
            downloader: URL 다운로더 (None이면 설정으로 생성)
        """
        self.settings = settings
        self.logger = logger
        self.metadata_reader = metadata_reader or MetadataReader(settings)
        self.downloader = downloader or UrlDownloader(settings)

    async def fetch(self, request: ScriptRequest) -> FetchResult:
        """
        스크립트 가져오기

        다운로드 실패는 예외로 올리지 않고 결과 상태로 돌려준다.
        대상 파일 쓰기 오류(OSError)는 그대로 전파된다.

        Args:
            request: 스크립트 종류와 저장 경로

        Returns:
            가져오기 결과
        """
        kind = request.kind
        destination = Path(request.destination_path)

        # URL 값은 앞뒤 공백을 제거, 인라인 스크립트는 그대로 사용
        script_url = (await self.metadata_reader.get(kind.url_attribute)).strip()
        if script_url:
            result = await self._fetch_from_url(kind, script_url, destination)
        else:
            inline_script = await self.metadata_reader.get(kind.inline_attribute)
            if inline_script:
                result = self._write_inline(kind, inline_script, destination)
            else:
                result = await self._report_missing(kind, destination)

        if destination.exists():
            set_owner_only_executable(destination)

        return result

    async def _fetch_from_url(self, kind: ScriptKind, script_url: str, destination: Path) -> FetchResult:
        """스크립트 URL에서 다운로드"""
        self.logger.info(f"{kind.url_attribute}: {script_url}")

        outcome = await self.downloader.download(script_url, destination)
        if not outcome.success:
            self.logger.error(f"{kind.value} 스크립트 다운로드 실패: {script_url}")
            return FetchResult(FetchStatus.DOWNLOAD_FAILED, kind, destination, script_url)

        self.logger.info(f"{kind.value} 스크립트 다운로드 성공: {script_url}")
        return FetchResult(FetchStatus.INSTALLED, kind, destination, script_url)

    def _write_inline(self, kind: ScriptKind, inline_script: str, destination: Path) -> FetchResult:
        """인라인 스크립트를 그대로 기록"""
        self.logger.info(f"메타데이터에서 {kind.value} 인라인 스크립트 발견")

        ensure_directory(destination.parent)
        destination.write_bytes(inline_script.encode("utf-8", errors="surrogateescape"))
        return FetchResult(FetchStatus.INSTALLED, kind, destination, INLINE_SOURCE)

    async def _report_missing(self, kind: ScriptKind, destination: Path) -> FetchResult:
        """스크립트 없음 기록 (전체 메타데이터 포함)"""
        self.logger.info(f"메타데이터에 {kind.value} 스크립트가 없습니다")

        metadata_dump = await self.metadata_reader.dump()
        self.logger.info(f"인스턴스 메타데이터:\n{metadata_dump}")
        return FetchResult(FetchStatus.NOT_CONFIGURED, kind, destination)

    async def close(self) -> None:
        """리소스 정리"""
        await self.metadata_reader.close()

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        await self.close()


# 편의 함수
async def fetch(
    destination: Union[str, Path],
    kind: Union[str, ScriptKind],
    settings: Optional[Settings] = None
) -> FetchResult:
    """
    편의 함수: 스크립트 가져오기

    Args:
        destination: 저장할 경로
        kind: 스크립트 종류 ("startup" 또는 "shutdown")
        settings: 시스템 설정 (None이면 기본 설정 사용)

    Returns:
        가져오기 결과
    """
    if settings is None:
        from ..config.settings import get_settings
        settings = get_settings()

    request = ScriptRequest(kind=ScriptKind(kind), destination_path=Path(destination))
    async with ScriptFetcher(settings) as fetcher:
        return await fetcher.fetch(request)
