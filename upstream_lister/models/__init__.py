"""
데이터 모델 패키지

업스트림 리스터의 핵심 데이터 모델들을 정의합니다.
"""

from .base import (
    CommandResult,
    Credentials,
    ListResponse,
    ModuleVersionQuery,
    RevisionInfo,
    VersionList,
)
from .enums import ErrorKind

__all__ = [
    "CommandResult",
    "Credentials",
    "ListResponse",
    "ModuleVersionQuery",
    "RevisionInfo",
    "VersionList",
    "ErrorKind",
]
