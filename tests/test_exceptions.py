"""
예외 클래스 테스트 모듈

업스트림 리스터의 커스텀 예외와 오류 종류 분류를 테스트합니다.
"""

import asyncio

import pytest

from upstream_lister.exceptions import (
    BadRequestException,
    ConfigurationException,
    InternalException,
    LookupTimeoutException,
    ModuleNotFoundException,
    UpstreamListerException,
    error_kind,
)
from upstream_lister.models.enums import ErrorKind


class TestUpstreamListerException:
    """기본 예외 클래스 테스트"""

    def test_basic_exception(self):
        """기본 예외 생성 테스트"""
        exc = UpstreamListerException("테스트 오류")

        assert str(exc) == "테스트 오류"
        assert exc.message == "테스트 오류"
        assert exc.error_code is None
        assert exc.op is None
        assert exc.kind == ErrorKind.INTERNAL

    def test_exception_with_op(self):
        """작업 이름 포함 예외 테스트"""
        exc = UpstreamListerException("테스트 오류", "TEST_ERROR", op="vcsLister.List")

        assert str(exc) == "vcsLister.List: 테스트 오류"
        assert exc.error_code == "TEST_ERROR"
        assert exc.op == "vcsLister.List"

    def test_kind_override(self):
        """오류 종류 재정의 테스트"""
        exc = UpstreamListerException("테스트 오류", kind=ErrorKind.NOT_FOUND)

        assert exc.kind == ErrorKind.NOT_FOUND
        # 클래스 기본값은 바뀌지 않아야 함
        assert UpstreamListerException.kind == ErrorKind.INTERNAL


class TestModuleNotFoundException:
    """모듈 찾기 실패 예외 테스트"""

    def test_embeds_stderr(self):
        """stderr 포함 테스트"""
        stderr = "go: example.org/foo@latest: 404 Not Found\n"
        exc = ModuleNotFoundException("example.org/foo", stderr, 1, op="vcsLister.List")

        assert "example.org/foo" in str(exc)
        assert "404 Not Found" in str(exc)
        assert "종료코드: 1" in str(exc)
        assert exc.stderr == stderr
        assert exc.return_code == 1
        assert exc.kind == ErrorKind.NOT_FOUND
        assert exc.error_code == "MODULE_NOT_FOUND"
        assert isinstance(exc, UpstreamListerException)


class TestOtherExceptions:
    """기타 예외 테스트"""

    def test_internal_exception(self):
        """내부 오류 예외 테스트"""
        exc = InternalException("디렉토리 생성 실패")

        assert "내부 오류: 디렉토리 생성 실패" in str(exc)
        assert exc.kind == ErrorKind.INTERNAL
        assert exc.error_code == "INTERNAL_ERROR"

    def test_timeout_exception(self):
        """타임아웃 예외 테스트"""
        exc = LookupTimeoutException("example.org/foo", 2.5)

        assert "2.5초" in str(exc)
        assert exc.kind == ErrorKind.DEADLINE_EXCEEDED
        assert exc.timeout_seconds == 2.5

    def test_bad_request_exception(self):
        """잘못된 요청 예외 테스트"""
        exc = BadRequestException("", "비어 있음")

        assert exc.kind == ErrorKind.BAD_REQUEST
        assert exc.error_code == "BAD_REQUEST"

    def test_configuration_exception(self):
        """설정 예외 테스트"""
        exc = ConfigurationException("GO_ENV", "형식 오류")

        assert "설정 오류: GO_ENV - 형식 오류" in str(exc)
        assert exc.config_key == "GO_ENV"
        assert exc.error_code == "CONFIGURATION_ERROR"


class TestErrorKind:
    """오류 종류 분류 테스트"""

    @pytest.mark.parametrize("error, expected", [
        (ModuleNotFoundException("m", "", 1), ErrorKind.NOT_FOUND),
        (InternalException("x"), ErrorKind.INTERNAL),
        (LookupTimeoutException("m", 1), ErrorKind.DEADLINE_EXCEEDED),
        (BadRequestException("m", "x"), ErrorKind.BAD_REQUEST),
        (asyncio.CancelledError(), ErrorKind.CANCELLED),
        (asyncio.TimeoutError(), ErrorKind.DEADLINE_EXCEEDED),
        (ValueError("x"), ErrorKind.INTERNAL),
    ])
    def test_error_kind(self, error, expected):
        """예외별 오류 종류 테스트"""
        assert error_kind(error) == expected
