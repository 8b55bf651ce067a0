"""
기본 데이터 모델 모듈

스크립트 페처의 핵심 데이터 구조들을 정의합니다.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .enums import FetchStatus, ScriptKind, UrlKind


@dataclass(frozen=True)
class ScriptRequest:
    """스크립트 가져오기 요청 (실행당 한 번 생성)"""

    kind: ScriptKind
    destination_path: Path


@dataclass(frozen=True)
class ClassifiedUrl:
    """분류된 스크립트 URL"""

    kind: UrlKind
    url: str
    # gs://<bucket>/<object> 형식, GENERIC이면 None
    storage_url: Optional[str] = None

    @property
    def uses_object_storage(self) -> bool:
        """오브젝트 스토리지 클라이언트 사용 여부"""
        return self.kind is not UrlKind.GENERIC


@dataclass
class DownloadOutcome:
    """다운로드 시도 결과"""

    success: bool
    log_excerpt: str = ""


@dataclass
class FetchResult:
    """스크립트 가져오기 결과"""

    status: FetchStatus
    kind: ScriptKind
    destination_path: Path
    # 스크립트 URL, "inline", 또는 None
    source: Optional[str] = None

    @property
    def installed(self) -> bool:
        """스크립트 설치 여부"""
        return self.status is FetchStatus.INSTALLED
