"""
인스턴스 메타데이터 조회 모듈

로컬 메타데이터 서버에서 인스턴스 속성을 읽는 기능을 제공합니다.
"""

import asyncio
from typing import Optional

import aiohttp

from ..config.settings import Settings
from ..utils.logging import get_logger

logger = get_logger(__name__)

METADATA_HEADERS = {"Metadata-Flavor": "Google"}


class MetadataReader:
    """메타데이터 서버 조회기"""

    def __init__(self, settings: Settings):
        """
        메타데이터 조회기 초기화

        Args:
            settings: 시스템 설정
        """
        self.settings = settings
        self.logger = logger
        self.base_url = settings.metadata_url.rstrip('/')
        self.session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """HTTP 세션 생성"""
        if not self.session:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.metadata_timeout),
                headers=METADATA_HEADERS
            )
        return self.session

    def attribute_url(self, attribute: str) -> str:
        """속성 조회 URL 구성"""
        return f"{self.base_url}/instance/attributes/{attribute}"

    async def _fetch_text(self, url: str, params: Optional[dict] = None) -> str:
        """
        URL 본문 조회, 실패하면 빈 문자열

        본문은 surrogateescape로 디코딩하므로 다시 인코딩하면 원본 바이트가 된다.
        """
        session = await self._get_session()

        try:
            async with session.get(url, params=params) as response:
                if response.status != 200:
                    self.logger.debug(f"메타데이터 조회 결과 없음: {url} (HTTP {response.status})")
                    return ""
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.debug(f"메타데이터 조회 오류: {url} - {e}")
            return ""

        return body.decode("utf-8", errors="surrogateescape")

    async def get(self, attribute: str) -> str:
        """
        인스턴스 속성 조회

        속성이 없을 때와 조회가 실패했을 때 모두 빈 문자열을 반환한다.

        Args:
            attribute: 속성 이름 (예: startup-script-url)

        Returns:
            속성 값 (없으면 빈 문자열)
        """
        return await self._fetch_text(self.attribute_url(attribute))

    async def dump(self) -> str:
        """전체 인스턴스 속성 트리 조회 (진단용)"""
        return await self._fetch_text(
            f"{self.base_url}/instance/attributes/",
            params={"recursive": "true"}
        )

    async def close(self) -> None:
        """세션 정리"""
        if self.session:
            await self.session.close()
            self.session = None

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        await self.close()
