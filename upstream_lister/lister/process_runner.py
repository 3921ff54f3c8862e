"""
프로세스 실행 모듈

외부 모듈 해석 도구(go)를 차일드 프로세스로 실행하고 표준 출력과 표준 에러를
수집합니다. 호출 태스크가 취소되거나 마감 시간을 넘기면 프로세스 트리 전체를
종료한 뒤 취소를 다시 전파합니다.
"""

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Mapping, Sequence, Union

import psutil

from ..models.base import CommandResult
from ..utils.helpers import fmt_mod_ver
from ..utils.logging import get_logger

logger = get_logger(__name__)

# 실행 파일을 찾을 수 없을 때 셸과 동일한 종료 코드 사용
SPAWN_FAILURE_RETURN_CODE = 127


def list_command(go_binary_path: str, module_path: str) -> List[str]:
    """
    최신 버전과 전체 버전 목록을 JSON으로 요청하는 go 명령 인자 구성

    Args:
        go_binary_path: go 바이너리 경로
        module_path: 모듈 경로

    Returns:
        List[str]: 명령 인자 목록
    """
    return [
        go_binary_path,
        "list", "-m", "-versions", "-json",
        fmt_mod_ver(module_path, "latest"),
    ]


class CommandRunner(ABC):
    """외부 명령 실행 추상 클래스"""

    @abstractmethod
    async def run(
        self,
        args: Sequence[str],
        env: Mapping[str, str],
        cwd: Union[str, Path]
    ) -> CommandResult:
        """
        명령 실행 (추상 메서드)

        Args:
            args: 명령 인자 (첫 번째 항목은 실행 파일)
            env: 환경 변수 (상속 없이 그대로 사용)
            cwd: 작업 디렉토리

        Returns:
            CommandResult: 종료 코드와 출력
        """


class SubprocessRunner(CommandRunner):
    """asyncio 차일드 프로세스 기반 명령 실행기"""

    def __init__(self, terminate_grace_period: float = 0.5):
        """
        Args:
            terminate_grace_period: SIGTERM 후 SIGKILL까지 대기 시간 (초)
        """
        self.terminate_grace_period = terminate_grace_period

    async def run(
        self,
        args: Sequence[str],
        env: Mapping[str, str],
        cwd: Union[str, Path]
    ) -> CommandResult:
        spawn = asyncio.ensure_future(asyncio.create_subprocess_exec(
            *args,
            cwd=str(cwd),
            env=dict(env),
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True  # 새 세션으로 시작하여 시그널 격리
        ))
        try:
            process = await asyncio.shield(spawn)
        except OSError as e:
            logger.warning(f"프로세스 생성 실패: {args[0]} - {e}")
            return CommandResult(
                return_code=SPAWN_FAILURE_RETURN_CODE,
                stdout="",
                stderr=f"{args[0]}: {e}"
            )
        except asyncio.CancelledError:
            # 생성 도중 취소: 생성이 끝난 프로세스를 종료한 뒤 취소 전파
            await self._terminate_spawned(spawn)
            raise

        logger.debug(f"명령 실행 시작: {' '.join(args)} (PID: {process.pid})")

        try:
            stdout, stderr = await process.communicate()
        except BaseException:
            # 취소, 타임아웃 포함: 프로세스를 남기지 않고 그대로 전파
            await self._terminate_process(process)
            raise

        return CommandResult(
            return_code=process.returncode,
            stdout=stdout.decode("utf-8", errors="replace") if stdout else "",
            stderr=stderr.decode("utf-8", errors="replace") if stderr else ""
        )

    async def _terminate_process(self, process: asyncio.subprocess.Process) -> None:
        """프로세스 트리 강제 종료"""
        if process.returncode is not None:
            return

        try:
            parent = psutil.Process(process.pid)
            children = parent.children(recursive=True)
        except psutil.NoSuchProcess:
            parent, children = None, []

        for proc in ([parent] if parent else []) + children:
            try:
                proc.terminate()
            except psutil.NoSuchProcess:
                pass

        try:
            await asyncio.wait_for(process.wait(), timeout=self.terminate_grace_period)
        except asyncio.TimeoutError:
            logger.warning(f"프로세스가 SIGTERM에 응답하지 않아 강제 종료: PID {process.pid}")
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()

        for child in children:
            try:
                if child.is_running():
                    child.kill()
            except psutil.NoSuchProcess:
                pass

        logger.info(f"프로세스 종료 완료: PID {process.pid} (종료코드: {process.returncode})")

    async def _terminate_spawned(self, spawn: "asyncio.Future[asyncio.subprocess.Process]") -> None:
        """생성 중 취소된 프로세스 정리"""
        try:
            process = await spawn
        except OSError:
            return
        await self._terminate_process(process)
