"""
공통 유틸리티 함수 모듈

스크립트 페처에서 공통으로 사용되는 헬퍼 함수들을 제공합니다.
"""

import asyncio
import inspect
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Union

from ..utils.logging import get_logger

logger = get_logger(__name__)

OWNER_ONLY_EXECUTABLE = 0o700


async def retry_with_backoff(
    func: Callable,
    max_attempts: int = 10,
    initial_delay: float = 1.0,
    backoff_factor: float = 1.0,
    max_delay: float = 60.0,
    exceptions: tuple = (Exception,)
) -> Any:
    """
    고정 시도 횟수 안에서 재시도하는 함수

    Args:
        func: 재시도할 함수
        max_attempts: 최대 시도 횟수 (첫 시도 포함)
        initial_delay: 초기 지연 시간 (초)
        backoff_factor: 지연 배수 (1.0이면 고정 간격)
        max_delay: 최대 지연 시간 (초)
        exceptions: 재시도할 예외 타입들

    Returns:
        Any: 함수 실행 결과

    Raises:
        Exception: 모든 시도 실패 시 마지막 예외
    """
    if max_attempts < 1:
        raise ValueError(f"시도 횟수는 1 이상이어야 합니다: {max_attempts}")

    for attempt in range(1, max_attempts + 1):
        try:
            if inspect.iscoroutinefunction(func):
                return await func()
            return func()
        except exceptions as e:
            if attempt == max_attempts:
                logger.debug(f"시도 {max_attempts}회 모두 실패: {e}")
                raise

            delay = min(initial_delay * (backoff_factor ** (attempt - 1)), max_delay)
            logger.debug(f"시도 {attempt}/{max_attempts} 실패, {delay:.1f}초 후 재시도: {e}")
            await asyncio.sleep(delay)


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    디렉토리 존재 확인 및 생성

    Args:
        path: 디렉토리 경로

    Returns:
        Path: 디렉토리 경로 객체
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def make_staging_path(destination: Path) -> Path:
    """
    대상 파일과 같은 디렉토리에 임시 파일 경로를 만든다

    같은 파일 시스템 안에서 os.replace로 원자적 교체가 가능하도록
    대상 디렉토리에 생성한다.

    Args:
        destination: 최종 대상 파일 경로

    Returns:
        Path: 비어 있는 임시 파일 경로
    """
    directory = ensure_directory(destination.parent)
    fd, name = tempfile.mkstemp(prefix=f".{destination.name}.", suffix=".part", dir=directory)
    os.close(fd)
    return Path(name)


def set_owner_only_executable(path: Union[str, Path]) -> None:
    """소유자만 읽기/쓰기/실행 가능하도록 권한 설정 (0700)"""
    os.chmod(path, OWNER_ONLY_EXECUTABLE)


def format_file_size(size_bytes: int) -> str:
    """
    파일 크기를 사람이 읽기 쉬운 형태로 변환

    Args:
        size_bytes: 바이트 단위 크기

    Returns:
        str: 형식화된 크기 문자열
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    size_value = float(size_bytes)

    while size_value >= 1024 and i < len(size_names) - 1:
        size_value = size_value / 1024
        i += 1

    return f"{size_value:.1f} {size_names[i]}"
