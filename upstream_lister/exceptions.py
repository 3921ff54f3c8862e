"""
예외 클래스 정의 모듈

업스트림 버전 조회에서 사용되는 커스텀 예외와 오류 종류 분류를 정의합니다.
"""

import asyncio
from typing import Optional

from .models.enums import ErrorKind


class UpstreamListerException(Exception):
    """업스트림 리스터 기본 예외 클래스"""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        op: Optional[str] = None,
        kind: Optional[ErrorKind] = None
    ):
        """
        예외 초기화

        Args:
            message: 오류 메시지
            error_code: 오류 코드 (선택사항)
            op: 오류가 발생한 작업 이름 (선택사항)
            kind: 오류 종류 (None이면 클래스 기본값)
        """
        super().__init__(f"{op}: {message}" if op else message)
        self.message = message
        self.error_code = error_code
        self.op = op
        if kind is not None:
            self.kind = kind


class ModuleNotFoundException(UpstreamListerException):
    """외부 도구가 0이 아닌 종료 코드로 끝났을 때 발생하는 예외"""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        module_path: str,
        stderr: str,
        return_code: Optional[int] = None,
        op: Optional[str] = None
    ):
        """
        모듈 찾기 실패 예외 초기화

        Args:
            module_path: 모듈 경로
            stderr: 외부 도구의 표준 에러 출력
            return_code: 프로세스 종료 코드
            op: 작업 이름
        """
        message = f"모듈을 찾을 수 없습니다: {module_path} (종료코드: {return_code}): {stderr.strip()}"
        super().__init__(message, "MODULE_NOT_FOUND", op)
        self.module_path = module_path
        self.stderr = stderr
        self.return_code = return_code


class InternalException(UpstreamListerException):
    """임시 디렉토리 생성, 파일 쓰기, 출력 디코딩 등 내부 인프라 오류"""

    kind = ErrorKind.INTERNAL

    def __init__(self, error_detail: str, op: Optional[str] = None):
        """
        내부 오류 예외 초기화

        Args:
            error_detail: 오류 상세 정보
            op: 작업 이름
        """
        super().__init__(f"내부 오류: {error_detail}", "INTERNAL_ERROR", op)
        self.error_detail = error_detail


class LookupTimeoutException(UpstreamListerException):
    """조회 마감 시간 초과 시 발생하는 예외"""

    kind = ErrorKind.DEADLINE_EXCEEDED

    def __init__(self, module_path: str, timeout_seconds: float, op: Optional[str] = None):
        """
        조회 타임아웃 예외 초기화

        Args:
            module_path: 모듈 경로
            timeout_seconds: 타임아웃 시간(초)
        """
        message = f"모듈 조회 타임아웃: {module_path} ({timeout_seconds}초)"
        super().__init__(message, "DEADLINE_EXCEEDED", op)
        self.module_path = module_path
        self.timeout_seconds = timeout_seconds


class BadRequestException(UpstreamListerException):
    """잘못된 모듈 경로 입력"""

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, module_path: str, error_detail: str, op: Optional[str] = None):
        message = f"잘못된 모듈 경로: {module_path!r} - {error_detail}"
        super().__init__(message, "BAD_REQUEST", op)
        self.module_path = module_path
        self.error_detail = error_detail


class ConfigurationException(UpstreamListerException):
    """설정 오류 시 발생하는 예외"""

    def __init__(self, config_key: str, error_detail: str):
        """
        설정 예외 초기화

        Args:
            config_key: 설정 키
            error_detail: 오류 상세 정보
        """
        message = f"설정 오류: {config_key} - {error_detail}"
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key
        self.error_detail = error_detail


def error_kind(error: BaseException) -> ErrorKind:
    """
    예외를 오류 종류로 분류

    Args:
        error: 분류할 예외

    Returns:
        ErrorKind: 오류 종류 (알 수 없는 예외는 INTERNAL)
    """
    if isinstance(error, UpstreamListerException):
        return error.kind
    if isinstance(error, asyncio.CancelledError):
        return ErrorKind.CANCELLED
    if isinstance(error, asyncio.TimeoutError):
        return ErrorKind.DEADLINE_EXCEEDED
    return ErrorKind.INTERNAL
