"""
로깅 시스템 모듈

로그 파일과 syslog 두 곳에 같은 내용을 남기는 로깅 시스템을 제공합니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Union

from ..config.settings import Settings

ROOT_LOGGER_NAME = "script_fetcher"


class FixedPrioritySysLogHandler(logging.handlers.SysLogHandler):
    """모든 레코드를 고정된 심각도로 전달하는 syslog 핸들러"""

    def __init__(self, address: Union[str, tuple], tag: str, priority: str = "info"):
        """
        핸들러 초기화

        Args:
            address: syslog 소켓 경로
            tag: syslog 식별 태그
            priority: 고정 심각도
        """
        super().__init__(
            address=address,
            facility=logging.handlers.SysLogHandler.LOG_DAEMON
        )
        self.ident = f"{tag}: "
        self.priority = priority

    def mapPriority(self, levelName: str) -> str:
        """레벨과 관계없이 고정 심각도 반환"""
        return self.priority


def setup_logging(settings: Settings) -> logging.Logger:
    """
    로깅 시스템 설정

    Args:
        settings: 시스템 설정 객체

    Returns:
        logging.Logger: 설정된 로거 객체
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper()))

    # 기존 핸들러 제거 (중복 방지)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt=settings.log_format,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 파일 핸들러 (로테이션 없음)
    log_file_path = Path(settings.log_file)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(
        filename=log_file_path,
        mode='a',
        encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if settings.syslog_enabled:
        try:
            # 소켓 연결 오류를 무시하는 파이썬 버전이 있어 존재 여부를 먼저 확인
            if not Path(settings.syslog_address).exists():
                raise FileNotFoundError(f"소켓 없음: {settings.syslog_address}")
            syslog_handler = FixedPrioritySysLogHandler(
                address=settings.syslog_address,
                tag=settings.syslog_tag
            )
        except OSError as e:
            logger.warning(f"syslog 연결 실패, 파일 로그만 사용: {settings.syslog_address} - {e}")
        else:
            # syslog 데몬이 시간을 붙이므로 메시지만 전달
            syslog_handler.setFormatter(logging.Formatter("%(message)s"))
            logger.addHandler(syslog_handler)

    if settings.console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # 프로파게이션 비활성화 (중복 출력 방지)
    logger.propagate = False

    logger.debug("로깅 시스템이 초기화되었습니다")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    특정 이름의 로거를 반환합니다

    Args:
        name: 로거 이름

    Returns:
        logging.Logger: 로거 객체
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
