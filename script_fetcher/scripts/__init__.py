"""
스크립트 가져오기 모듈

인스턴스 메타데이터가 가리키는 시작/종료 스크립트를 내려받아 저장하는 기능을 제공합니다.
"""

from .downloader import UrlDownloader
from .fetcher import ScriptFetcher, fetch
from .metadata import MetadataReader
from .repository import GsutilTransport, HttpTransport, TransportBase
from .url_classifier import classify_url

__all__ = [
    "UrlDownloader",
    "ScriptFetcher",
    "MetadataReader",
    "GsutilTransport",
    "HttpTransport",
    "TransportBase",
    "classify_url",
    "fetch",
]
