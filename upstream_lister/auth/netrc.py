"""
인증 정보 전파 모듈

모듈 경로가 설정된 호스트 패턴과 일치할 때 호출자 인증 정보를 go 명령이
읽을 수 있는 임시 .netrc 파일로 기록합니다.
"""

import os
import sys
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Optional

from ..exceptions import InternalException
from ..utils.filesystem import FileSystem, OsFileSystem
from ..utils.helpers import host_of
from ..utils.logging import get_logger

logger = get_logger(__name__)

NETRC_DIR_PREFIX = "netrcp"


def netrc_filename() -> str:
    """플랫폼별 netrc 파일 이름"""
    return "_netrc" if sys.platform == "win32" else ".netrc"


def matches_auth_pattern(patterns: Iterable[str], module_path: str) -> bool:
    """
    모듈 경로가 패턴 중 하나와 일치하는지 확인

    패턴은 glob 형식이며 호스트 토큰 또는 전체 모듈 경로와 비교합니다.

    Args:
        patterns: 호스트 패턴 목록 (예: example.org, *.corp.internal)
        module_path: 모듈 경로

    Returns:
        bool: 일치 여부
    """
    host = host_of(module_path)
    return any(
        fnmatchcase(host, pattern) or fnmatchcase(module_path, pattern)
        for pattern in patterns
    )


def write_temporary_netrc(
    host: str,
    user: str,
    password: str,
    fs: Optional[FileSystem] = None,
    op: Optional[str] = None
) -> Path:
    """
    단일 호스트용 .netrc 파일을 새 임시 디렉토리에 기록

    Args:
        host: 인증 대상 호스트
        user: 사용자 이름
        password: 비밀번호
        fs: 파일시스템 (None이면 운영체제 기본값)
        op: 오류에 기록할 작업 이름

    Returns:
        Path: .netrc 파일이 들어 있는 디렉토리 경로 (삭제 책임은 호출자)

    Raises:
        InternalException: 공백 문자가 포함된 토큰, 디렉토리 또는 파일 생성 실패
    """
    for name, token in (("host", host), ("login", user), ("password", password)):
        if any(c.isspace() for c in token):
            raise InternalException(f"netrc {name} 값에 공백 문자를 포함할 수 없습니다", op)

    fs = fs or OsFileSystem()
    try:
        netrc_dir = fs.temp_dir(NETRC_DIR_PREFIX)
    except OSError as e:
        raise InternalException(f"netrc 임시 디렉토리 생성 실패: {e}", op) from e

    netrc_path = netrc_dir / netrc_filename()
    content = f"machine {host} login {user} password {password}\n"
    try:
        fd = os.open(netrc_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        fs.remove_all(netrc_dir)
        raise InternalException(f"netrc 파일 기록 실패: {e}", op) from e

    return netrc_dir


class CredentialPropagator:
    """호출자 인증 정보 전파 여부 판단 및 netrc 생성"""

    def __init__(self, enabled: bool, patterns: Iterable[str], fs: Optional[FileSystem] = None):
        """
        Args:
            enabled: 전역 전파 활성화 플래그
            patterns: 전파 대상 호스트 패턴 목록
            fs: 파일시스템
        """
        self.enabled = enabled
        self.patterns = list(patterns)
        self.fs = fs or OsFileSystem()

    def should_propagate(self, module_path: str) -> bool:
        return self.enabled and matches_auth_pattern(self.patterns, module_path)

    def materialize(self, module_path: str, user: str, password: str, op: Optional[str] = None) -> Path:
        """
        모듈 경로의 호스트에 대한 netrc 디렉토리 생성

        Returns:
            Path: netrc 디렉토리 경로
        """
        host = host_of(module_path)
        logger.debug(f"인증 정보 전파: {host}")
        return write_temporary_netrc(host, user, password, self.fs, op)
