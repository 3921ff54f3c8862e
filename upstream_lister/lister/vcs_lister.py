"""
업스트림 버전 리스터 모듈

go 명령에 위임하여 모듈의 사용 가능한 버전 목록과 최신 버전 메타데이터를
조회합니다. 호출마다 인증 정보 전파 → 샌드박스 생성 → 프로세스 실행 →
응답 디코딩을 순서대로 수행하며, 호출 간에 공유되는 가변 상태는 없습니다.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional, Tuple

from pydantic import ValidationError

from ..auth.context import credentials_from_context
from ..auth.netrc import CredentialPropagator
from ..exceptions import (
    BadRequestException,
    InternalException,
    LookupTimeoutException,
    ModuleNotFoundException,
    error_kind,
)
from ..models.base import CommandResult, Credentials, ModuleVersionQuery, RevisionInfo, VersionList
from ..monitoring.metrics import ACTIVE_LOOKUPS, SUCCESS_OUTCOME, record_lookup
from ..utils.filesystem import FileSystem, OsFileSystem
from ..utils.helpers import format_duration
from ..utils.logging import get_logger
from .decoder import decode_list_response
from .process_runner import CommandRunner, SubprocessRunner, list_command
from .sandbox import ExecutionContext, SandboxBuilder

logger = get_logger(__name__)

OP = "vcsLister.List"


class UpstreamLister(ABC):
    """업스트림 버전 리스터 추상 클래스"""

    @abstractmethod
    async def list(self, module_path: str) -> Tuple[RevisionInfo, VersionList]:
        """
        모듈의 최신 버전 정보와 버전 목록 조회 (추상 메서드)

        Args:
            module_path: 모듈 경로

        Returns:
            (RevisionInfo, 버전 목록) 튜플
        """


class VCSLister(UpstreamLister):
    """go 명령을 사용하는 업스트림 버전 리스터"""

    def __init__(
        self,
        go_binary_path: str,
        env: Iterable[str],
        fs: Optional[FileSystem] = None,
        propagate_auth: bool = False,
        propagate_auth_patterns: Iterable[str] = (),
        runner: Optional[CommandRunner] = None,
        timeout: Optional[float] = None,
        metrics_enabled: bool = True
    ):
        """
        리스터 초기화

        Args:
            go_binary_path: go 바이너리 경로
            env: go 명령 기본 환경 (KEY=VALUE 목록)
            fs: 파일시스템 (None이면 운영체제 기본값)
            propagate_auth: 인증 정보 전파 활성화 여부
            propagate_auth_patterns: 인증 정보를 전파할 호스트 패턴
            runner: 명령 실행기 (None이면 SubprocessRunner)
            timeout: 기본 조회 타임아웃 (초, None이면 제한 없음)
            metrics_enabled: 조회 메트릭 기록 여부
        """
        self.go_binary_path = go_binary_path
        self.fs = fs or OsFileSystem()
        self.propagator = CredentialPropagator(propagate_auth, propagate_auth_patterns, self.fs)
        self.sandbox_builder = SandboxBuilder(self.fs, env)
        self.runner = runner or SubprocessRunner()
        self.timeout = timeout
        self.metrics_enabled = metrics_enabled
        self.logger = logger

    @classmethod
    def from_settings(cls, settings, runner: Optional[CommandRunner] = None) -> "VCSLister":
        """
        설정 객체로부터 리스터 생성

        Args:
            settings: 시스템 설정
            runner: 명령 실행기 (None이면 설정의 종료 대기 시간을 쓰는 SubprocessRunner)
        """
        return cls(
            go_binary_path=settings.go_binary_path,
            env=settings.go_env,
            fs=OsFileSystem(settings.temp_root),
            propagate_auth=settings.propagate_auth,
            propagate_auth_patterns=settings.propagate_auth_patterns,
            runner=runner or SubprocessRunner(settings.terminate_grace_period),
            timeout=settings.list_timeout or None,
            metrics_enabled=settings.metrics_enabled
        )

    async def list(
        self,
        module_path: str,
        credentials: Optional[Credentials] = None,
        timeout: Optional[float] = None
    ) -> Tuple[RevisionInfo, VersionList]:
        """
        모듈의 최신 버전 정보와 버전 목록 조회

        Args:
            module_path: 모듈 경로 (예: example.org/foo/bar)
            credentials: 호출자 인증 정보 (None이면 인증 컨텍스트에서 조회)
            timeout: 이 호출의 마감 시간 (초, None이면 기본값)

        Returns:
            (RevisionInfo, 버전 목록) 튜플

        Raises:
            BadRequestException: 모듈 경로가 잘못된 경우
            ModuleNotFoundException: go 명령이 실패한 경우
            InternalException: 임시 리소스 생성 또는 출력 디코딩 실패
            LookupTimeoutException: 마감 시간 초과
            asyncio.CancelledError: 호출 태스크가 취소된 경우
        """
        try:
            query = ModuleVersionQuery(module_path=module_path, credentials=credentials, timeout=timeout)
        except ValidationError as e:
            raise BadRequestException(module_path, str(e), OP) from e
        return await self.list_query(query)

    async def list_query(self, query: ModuleVersionQuery) -> Tuple[RevisionInfo, VersionList]:
        """검증된 조회 요청 실행"""
        start_time = time.monotonic()
        outcome = SUCCESS_OUTCOME
        if self.metrics_enabled:
            ACTIVE_LOOKUPS.inc()

        self.logger.info(f"업스트림 버전 조회 시작: {query.module_path}")
        try:
            rev, versions = await self._list(query)
            self.logger.info(
                f"업스트림 버전 조회 완료: {query.module_path} -> {rev.version} "
                f"(버전 {len(versions)}개, {format_duration(time.monotonic() - start_time)})"
            )
            return rev, versions
        except BaseException as e:
            outcome = error_kind(e).value
            self.logger.warning(f"업스트림 버전 조회 실패: {query.module_path} ({outcome})")
            raise
        finally:
            if self.metrics_enabled:
                ACTIVE_LOOKUPS.dec()
                record_lookup(outcome, time.monotonic() - start_time)

    async def _list(self, query: ModuleVersionQuery) -> Tuple[RevisionInfo, VersionList]:
        module_path = query.module_path
        netrc_dir = self._prepare_credentials(query)

        try:
            ctx = self.sandbox_builder.build(netrc_dir, OP)
        except BaseException:
            if netrc_dir is not None:
                self.fs.remove_all(netrc_dir)
            raise

        with ctx:
            result = await self._run(ctx, query)

        if not result.succeeded:
            # go 명령의 종료 코드로는 "모듈 없음"과 예기치 않은 실패를 구분할 수 없어
            # 둘 다 NotFound로 보고하고 stderr를 오류에 남긴다
            raise ModuleNotFoundException(module_path, result.stderr, result.return_code, OP)

        if result.stderr.strip():
            self.logger.debug(f"go list 경고 출력: {module_path} - {result.stderr.strip()}")

        return decode_list_response(result.stdout, OP)

    def _prepare_credentials(self, query: ModuleVersionQuery) -> Optional[Path]:
        """전파 조건을 만족하면 netrc 디렉토리를 만들어 반환"""
        credentials = query.credentials or credentials_from_context()
        if credentials is None or not self.propagator.should_propagate(query.module_path):
            return None
        self.logger.debug("인증 정보 전파")
        return self.propagator.materialize(query.module_path, credentials.user, credentials.password, OP)

    async def _run(self, ctx: ExecutionContext, query: ModuleVersionQuery) -> CommandResult:
        args = list_command(self.go_binary_path, query.module_path)
        timeout = query.timeout or self.timeout

        try:
            if timeout:
                return await asyncio.wait_for(self.runner.run(args, ctx.env, ctx.work_dir), timeout=timeout)
            return await self.runner.run(args, ctx.env, ctx.work_dir)
        except asyncio.TimeoutError as e:
            raise LookupTimeoutException(query.module_path, timeout, OP) from e
        except Exception as e:
            raise InternalException(f"go 명령 실행 오류: {e}", OP) from e
