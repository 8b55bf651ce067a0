"""
공통 테스트 픽스처

가짜 메타데이터 서버와 로깅 정리 픽스처를 제공합니다.
"""

import json
import logging
import stat
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from script_fetcher.config.settings import Settings
from script_fetcher.utils.logging import ROOT_LOGGER_NAME, setup_logging

METADATA_PREFIX = "/computeMetadata/v1"


class FakeMetadataServer:
    """메타데이터 서버와 스크립트 호스팅을 흉내 내는 테스트 서버"""

    def __init__(self):
        self.attributes: dict = {}
        self.files: dict = {}
        self.status_sequence: dict = {}
        self.requests: list = []
        self.app = web.Application()
        self.app.router.add_get(f"{METADATA_PREFIX}/instance/attributes/", self._handle_dump)
        self.app.router.add_get(f"{METADATA_PREFIX}/instance/attributes/{{name}}", self._handle_attribute)
        self.app.router.add_get("/files/{name:.+}", self._handle_file)
        self.server = TestServer(self.app)

    async def start(self) -> None:
        await self.server.start_server()

    async def close(self) -> None:
        await self.server.close()

    @property
    def metadata_url(self) -> str:
        return str(self.server.make_url(METADATA_PREFIX))

    def file_url(self, name: str) -> str:
        return str(self.server.make_url(f"/files/{name}"))

    def _check_flavor(self, request: web.Request) -> None:
        if request.headers.get("Metadata-Flavor") != "Google":
            raise web.HTTPForbidden()

    async def _handle_attribute(self, request: web.Request) -> web.Response:
        self._check_flavor(request)
        self.requests.append(request.path)
        name = request.match_info["name"]
        if name not in self.attributes:
            raise web.HTTPNotFound()
        return web.Response(body=self.attributes[name].encode("utf-8"))

    async def _handle_dump(self, request: web.Request) -> web.Response:
        self._check_flavor(request)
        self.requests.append(request.path_qs)
        if request.query.get("recursive") != "true":
            return web.Response(text="\n".join(self.attributes))
        return web.Response(text=json.dumps(self.attributes))

    async def _handle_file(self, request: web.Request) -> web.Response:
        name = request.match_info["name"]
        self.requests.append(request.path)

        # 지정된 상태 코드를 순서대로 반환한 뒤 정상 응답
        statuses = self.status_sequence.get(name)
        if statuses:
            return web.Response(status=statuses.pop(0), text="error")

        if name not in self.files:
            raise web.HTTPNotFound()
        return web.Response(body=self.files[name])

    def file_request_count(self, name: str) -> int:
        return self.requests.count(f"/files/{name}")


@pytest_asyncio.fixture
async def metadata_server():
    """가짜 메타데이터 서버 픽스처"""
    server = FakeMetadataServer()
    await server.start()
    yield server
    await server.close()


@pytest.fixture
def log_file(tmp_path) -> Path:
    """테스트용 로그 파일 경로"""
    return tmp_path / "log" / "startupscript.log"


@pytest.fixture
def make_settings(log_file):
    """테스트용 설정 생성 함수 픽스처"""
    def factory(**overrides) -> Settings:
        values = {
            "log_file": str(log_file),
            "syslog_enabled": False,
            "http_max_attempts": 3,
            "http_retry_delay": 0,
            "http_timeout": 5,
        }
        values.update(overrides)
        return Settings(**values)

    return factory


@pytest.fixture
def logged_settings(make_settings, metadata_server):
    """가짜 메타데이터 서버를 가리키고 로그 파일이 설정된 설정"""
    settings = make_settings(metadata_url=metadata_server.metadata_url)
    setup_logging(settings)
    return settings


@pytest.fixture
def fake_gsutil(tmp_path):
    """gsutil을 흉내 내는 셸 스크립트 생성 함수 픽스처"""
    def factory(body: str) -> str:
        script = tmp_path / "bin" / "gsutil"
        script.parent.mkdir(parents=True, exist_ok=True)
        # 인자: -h Cache-Control:no-cache cp <source> <target>
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script)

    return factory


@pytest.fixture(autouse=True)
def reset_logging():
    """테스트마다 로거 핸들러 정리"""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
