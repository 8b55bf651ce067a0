"""
스크립트 URL 다운로더 모듈

URL 분류에 따라 전송 방식을 고르고, 진단 출력을 임시 로그에 모았다가
실패한 경우에만 메인 로그로 옮깁니다.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional

from ..config.settings import Settings
from ..exceptions import ScriptDownloadException
from ..models.base import ClassifiedUrl, DownloadOutcome
from ..utils.helpers import make_staging_path
from ..utils.logging import get_logger
from .repository import GsutilTransport, HttpTransport, TransportBase
from .url_classifier import classify_url

logger = get_logger(__name__)


class UrlDownloader:
    """스크립트 URL 다운로더"""

    def __init__(
        self,
        settings: Settings,
        storage_transport: Optional[TransportBase] = None,
        http_transport: Optional[TransportBase] = None
    ):
        """
        다운로더 초기화

        Args:
            settings: 시스템 설정
            storage_transport: Cloud Storage 전송 방식 (None이면 gsutil)
            http_transport: 일반 HTTP 전송 방식 (None이면 aiohttp)
        """
        self.settings = settings
        self.logger = logger
        self.storage_transport = storage_transport or GsutilTransport(settings)
        self.http_transport = http_transport or HttpTransport(settings)

    def _select_transport(self, classified: ClassifiedUrl) -> TransportBase:
        """분류 결과에 따른 전송 방식 선택"""
        if classified.uses_object_storage:
            return self.storage_transport
        return self.http_transport

    async def download(self, url: str, destination: Path) -> DownloadOutcome:
        """
        URL 내용을 대상 경로에 저장

        실패 시 대상 경로는 건드리지 않는다.

        Args:
            url: 스크립트 URL
            destination: 저장할 경로

        Returns:
            다운로드 결과 (실패 시 임시 로그 내용 포함)
        """
        destination = Path(destination)
        classified = classify_url(url)
        transport = self._select_transport(classified)
        source = classified.storage_url or classified.url

        self.logger.info(f"{transport.name}로 다운로드: {source} -> {destination}")

        fd, scratch_name = tempfile.mkstemp(prefix="script-fetcher-", suffix=".log")
        os.close(fd)
        scratch_path = Path(scratch_name)
        staging_path: Optional[Path] = None

        try:
            staging_path = make_staging_path(destination)
            with open(scratch_path, "a", encoding="utf-8") as scratch_log:
                try:
                    await transport.download(source, staging_path, scratch_log)
                    success = True
                except ScriptDownloadException as e:
                    scratch_log.write(f"{e.message}\n")
                    success = False

            if success:
                os.replace(staging_path, destination)
                return DownloadOutcome(success=True)

            log_excerpt = scratch_path.read_text(encoding="utf-8", errors="replace").strip()
            self.logger.error(f"다운로드 실패: {classified.url}")
            if log_excerpt:
                self.logger.error(log_excerpt)
            return DownloadOutcome(success=False, log_excerpt=log_excerpt)

        finally:
            scratch_path.unlink(missing_ok=True)
            if staging_path is not None:
                staging_path.unlink(missing_ok=True)
