"""
스크립트 페처 실행 모듈

명령행 인자를 해석해 스크립트를 가져오고 종료 코드를 결정합니다.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config.settings import Settings
from .exceptions import ConfigurationException
from .models.base import FetchResult, ScriptRequest
from .models.enums import FetchStatus, ScriptKind
from .scripts.fetcher import ScriptFetcher
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """명령행 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="script-fetcher",
        description="인스턴스 메타데이터에서 시작/종료 스크립트를 가져옵니다"
    )
    parser.add_argument("destination", type=Path, help="스크립트를 저장할 경로")
    parser.add_argument(
        "kind",
        choices=[kind.value for kind in ScriptKind],
        help="스크립트 종류"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="다운로드 실패 시 종료 코드 1 반환"
    )
    parser.add_argument("--log-file", help="로그 파일 경로")
    parser.add_argument("--metadata-url", help="메타데이터 서버 기본 URL")
    parser.add_argument("--no-syslog", action="store_true", help="syslog 전달 비활성화")
    parser.add_argument("--verbose", action="store_true", help="콘솔에도 로그 출력")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """환경 변수 설정에 명령행 인자를 덮어써 설정 생성"""
    overrides = {}
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.metadata_url:
        overrides["metadata_url"] = args.metadata_url
    if args.no_syslog:
        overrides["syslog_enabled"] = False
    if args.verbose:
        overrides["console_logging"] = True

    settings = Settings(**overrides)
    settings.validate_configuration()
    return settings


def exit_code_for(result: FetchResult, strict: bool = False) -> int:
    """
    결과에 따른 종료 코드

    기본은 항상 0 (best effort), strict 모드에서는 다운로드 실패만 1
    """
    if strict and result.status is FetchStatus.DOWNLOAD_FAILED:
        return 1
    return 0


async def run(settings: Settings, request: ScriptRequest) -> FetchResult:
    """스크립트 가져오기 실행"""
    async with ScriptFetcher(settings) as fetcher:
        return await fetcher.fetch(request)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """스크립트 페처 메인 함수"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
    except ConfigurationException as e:
        parser.exit(2, f"{parser.prog}: {e.message}\n")

    setup_logging(settings)

    request = ScriptRequest(kind=ScriptKind(args.kind), destination_path=args.destination)
    result = asyncio.run(run(settings, request))

    logger.debug(f"가져오기 결과: {result.status.value}")
    return exit_code_for(result, strict=args.strict)


if __name__ == "__main__":
    sys.exit(main())
