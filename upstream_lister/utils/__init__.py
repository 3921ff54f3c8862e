"""
유틸리티 패키지

공통으로 사용되는 유틸리티 함수들을 포함합니다.
"""

from .logging import setup_logging, get_logger
from .helpers import fmt_mod_ver, host_of, env_list_to_dict, format_duration
from .filesystem import FileSystem, OsFileSystem

__all__ = [
    "setup_logging",
    "get_logger",
    "fmt_mod_ver",
    "host_of",
    "env_list_to_dict",
    "format_duration",
    "FileSystem",
    "OsFileSystem",
]
