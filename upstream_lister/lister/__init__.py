"""
리스터 패키지

인증 정보 전파, 실행 샌드박스, 프로세스 실행, 응답 디코딩을 묶어
업스트림 버전 조회 기능을 제공합니다.
"""

from .decoder import decode_list_response
from .process_runner import CommandRunner, SubprocessRunner, list_command
from .sandbox import ExecutionContext, SandboxBuilder, prepare_env
from .vcs_lister import UpstreamLister, VCSLister

__all__ = [
    "decode_list_response",
    "CommandRunner",
    "SubprocessRunner",
    "list_command",
    "ExecutionContext",
    "SandboxBuilder",
    "prepare_env",
    "UpstreamLister",
    "VCSLister",
]
