"""
유틸리티 패키지

공통으로 사용되는 유틸리티 함수들을 포함합니다.
"""

from .logging import get_logger, setup_logging
from .helpers import ensure_directory, retry_with_backoff, set_owner_only_executable

__all__ = [
    "get_logger",
    "setup_logging",
    "ensure_directory",
    "retry_with_backoff",
    "set_owner_only_executable",
]
