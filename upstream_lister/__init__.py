"""
업스트림 버전 리스터

go 명령에 위임하여 모듈의 업스트림 버전 목록과 최신 버전 메타데이터를 조회합니다.
"""

from .exceptions import (
    BadRequestException,
    InternalException,
    LookupTimeoutException,
    ModuleNotFoundException,
    UpstreamListerException,
    error_kind,
)
from .lister import UpstreamLister, VCSLister
from .models import Credentials, ErrorKind, ModuleVersionQuery, RevisionInfo

__version__ = "0.1.0"

__all__ = [
    "BadRequestException",
    "InternalException",
    "LookupTimeoutException",
    "ModuleNotFoundException",
    "UpstreamListerException",
    "error_kind",
    "UpstreamLister",
    "VCSLister",
    "Credentials",
    "ErrorKind",
    "ModuleVersionQuery",
    "RevisionInfo",
]
