"""
데이터 모델 패키지

스크립트 페처의 모든 데이터 모델을 포함합니다.
"""

from .base import ClassifiedUrl, DownloadOutcome, FetchResult, ScriptRequest
from .enums import FetchStatus, ScriptKind, UrlKind

__all__ = [
    "ClassifiedUrl",
    "DownloadOutcome",
    "FetchResult",
    "ScriptRequest",
    "FetchStatus",
    "ScriptKind",
    "UrlKind",
]
