"""
스크립트 URL 분류 모듈

스크립트 URL이 Cloud Storage 객체를 가리키는지 판별하고
gs://<bucket>/<object> 형식으로 변환합니다.
"""

import re

from ..models.base import ClassifiedUrl
from ..models.enums import UrlKind

STORAGE_SCHEME = "gs://"

# 로케일과 무관하게 ASCII 범위만 허용
BUCKET_PATTERN = r"[a-z0-9][-_.a-z0-9]*[a-z0-9]"
# gsutil 와일드카드 문자(*, ?)와 공백 문자가 없는 비어 있지 않은 객체 이름
OBJECT_PATTERN = r"[^*?\s]+"

VIRTUAL_HOSTED_RE = re.compile(
    rf"https?://(?P<bucket>{BUCKET_PATTERN})\.storage\.googleapis\.com/(?P<object>{OBJECT_PATTERN})",
    re.ASCII,
)
PATH_STYLE_RE = re.compile(
    rf"https?://(?:commondata)?storage\.googleapis\.com/(?P<bucket>{BUCKET_PATTERN})/(?P<object>{OBJECT_PATTERN})",
    re.ASCII,
)


def to_storage_url(bucket: str, object_name: str) -> str:
    """버킷과 객체 이름으로 gs:// URL 생성"""
    return f"{STORAGE_SCHEME}{bucket}/{object_name}"


def classify_url(url: str) -> ClassifiedUrl:
    """
    스크립트 URL 분류

    순서대로 검사하며 처음 일치하는 분류를 사용한다.

    Args:
        url: 메타데이터에서 읽은 스크립트 URL

    Returns:
        분류 결과 (오브젝트 스토리지 분류면 gs:// URL 포함)
    """
    url = url.strip()

    if url.startswith(STORAGE_SCHEME):
        return ClassifiedUrl(UrlKind.DIRECT_SCHEME, url, url)

    match = VIRTUAL_HOSTED_RE.fullmatch(url)
    if match:
        return ClassifiedUrl(
            UrlKind.VIRTUAL_HOSTED,
            url,
            to_storage_url(match.group("bucket"), match.group("object")),
        )

    match = PATH_STYLE_RE.fullmatch(url)
    if match:
        return ClassifiedUrl(
            UrlKind.PATH_STYLE,
            url,
            to_storage_url(match.group("bucket"), match.group("object")),
        )

    return ClassifiedUrl(UrlKind.GENERIC, url)
