"""
실행 샌드박스 모듈

호출마다 고유한 작업 디렉토리와 모듈 캐시 디렉토리를 만들고 go 명령의
환경 변수를 구성합니다. 격리는 고유 이름의 임시 디렉토리로 보장하며
잠금을 사용하지 않습니다.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

from ..exceptions import InternalException
from ..utils.filesystem import FileSystem
from ..utils.helpers import env_list_to_dict
from ..utils.logging import get_logger

logger = get_logger(__name__)

WORK_DIR_PREFIX = "go-list"
GOPATH_PREFIX = "athens"

# 서버 프로세스 환경에서 그대로 넘겨줄 변수
PASSTHROUGH_ENV_KEYS = (
    "PATH",
    "HOME",
    "USERPROFILE",
    "SYSTEMROOT",
    "TMPDIR",
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "NO_PROXY",
    "http_proxy",
    "https_proxy",
    "no_proxy",
    "GIT_SSH",
    "GIT_SSH_COMMAND",
    "SSH_AUTH_SOCK",
    "GIT_TERMINAL_PROMPT",
    "GOPROXY",
    "GOPRIVATE",
    "GONOPROXY",
    "GONOSUMDB",
    "GOSUMDB",
    "GOINSECURE",
    "GOFLAGS",
    "GOROOT",
)


def prepare_env(
    gopath: Path,
    netrc_dir: Optional[Path],
    base_env: Iterable[str],
    inherited: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    go 명령용 환경 변수 구성

    적용 순서: 상속 변수 → 설정된 기본 환경 → 모듈 캐시 재정의 → netrc 디렉토리

    Args:
        gopath: 호출 전용 모듈 캐시 루트
        netrc_dir: .netrc 파일이 있는 디렉토리 (None이면 인증 정보 주입 없음)
        base_env: 설정된 기본 환경 (KEY=VALUE 목록)
        inherited: 상속할 환경 (None이면 os.environ)

    Returns:
        Dict[str, str]: 하위 프로세스 환경 변수
    """
    inherited = os.environ if inherited is None else inherited
    env = {key: inherited[key] for key in PASSTHROUGH_ENV_KEYS if key in inherited}
    env.update(env_list_to_dict(base_env))

    env["GOPATH"] = str(gopath)
    env["GOMODCACHE"] = str(gopath / "pkg" / "mod")
    env["GOCACHE"] = str(gopath / "cache")
    env["GO111MODULE"] = "on"
    env["CGO_ENABLED"] = "0"

    if netrc_dir is not None:
        # go와 git은 $HOME/.netrc에서 호스트별 인증 정보를 찾는다
        env["HOME"] = str(netrc_dir)
        env["USERPROFILE"] = str(netrc_dir)

    return env


@dataclass
class ExecutionContext:
    """단일 조회 호출 전용 실행 컨텍스트"""

    fs: FileSystem
    work_dir: Path
    gopath: Path
    env: Dict[str, str] = field(default_factory=dict)
    netrc_dir: Optional[Path] = None

    def owned_paths(self) -> list:
        paths = [self.work_dir, self.gopath]
        if self.netrc_dir is not None:
            paths.append(self.netrc_dir)
        return paths

    def cleanup(self) -> None:
        """이 호출이 만든 모든 디렉토리 삭제 (삭제 실패는 기록 후 다음 경로 계속)"""
        for path in self.owned_paths():
            try:
                self.fs.remove_all(path)
            except OSError as e:
                logger.error(f"임시 디렉토리 삭제 실패: {path} - {e}")

    def __enter__(self) -> "ExecutionContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()


class SandboxBuilder:
    """호출별 실행 샌드박스 생성기"""

    def __init__(self, fs: FileSystem, base_env: Iterable[str]):
        """
        Args:
            fs: 파일시스템
            base_env: 설정된 기본 환경 (KEY=VALUE 목록)
        """
        self.fs = fs
        self.base_env = list(base_env)

    def build(self, netrc_dir: Optional[Path] = None, op: Optional[str] = None) -> ExecutionContext:
        """
        작업 디렉토리와 모듈 캐시 디렉토리를 새로 만들어 실행 컨텍스트 구성

        Args:
            netrc_dir: 인증 정보 디렉토리 (컨텍스트가 소유권을 넘겨받음)
            op: 오류에 기록할 작업 이름

        Returns:
            ExecutionContext: 실행 컨텍스트

        Raises:
            InternalException: 디렉토리 생성 실패 (이미 만든 디렉토리는 삭제됨)
        """
        try:
            work_dir = self.fs.temp_dir(WORK_DIR_PREFIX)
        except OSError as e:
            raise InternalException(f"작업 디렉토리 생성 실패: {e}", op) from e

        try:
            gopath = self.fs.temp_dir(GOPATH_PREFIX)
        except OSError as e:
            self.fs.remove_all(work_dir)
            raise InternalException(f"모듈 캐시 디렉토리 생성 실패: {e}", op) from e

        env = prepare_env(gopath, netrc_dir, self.base_env)
        return ExecutionContext(
            fs=self.fs,
            work_dir=work_dir,
            gopath=gopath,
            env=env,
            netrc_dir=netrc_dir
        )
