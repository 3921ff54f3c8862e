"""
인증 컨텍스트 모듈

현재 호출(태스크)에 연결된 호출자 인증 정보를 보관합니다. asyncio 태스크는
생성 시점의 컨텍스트를 복사하므로 동시 호출 간에 값이 섞이지 않습니다.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

from ..models.base import Credentials

_credentials: ContextVar[Optional[Credentials]] = ContextVar("upstream_lister_credentials", default=None)


def set_credentials(credentials: Optional[Credentials]) -> Token:
    """
    현재 컨텍스트에 인증 정보 설정

    Args:
        credentials: 호출자 인증 정보

    Returns:
        Token: reset_credentials에 전달할 토큰
    """
    return _credentials.set(credentials)


def reset_credentials(token: Token) -> None:
    """set_credentials 이전 상태로 복원"""
    _credentials.reset(token)


def credentials_from_context() -> Optional[Credentials]:
    """
    현재 컨텍스트의 인증 정보 조회

    Returns:
        Optional[Credentials]: 인증 정보 (없으면 None)
    """
    return _credentials.get()


@contextmanager
def credentials_scope(user: str, password: str) -> Iterator[Credentials]:
    """with 블록 동안 인증 정보를 설정하는 컨텍스트 매니저"""
    credentials = Credentials(user=user, password=password)
    token = set_credentials(credentials)
    try:
        yield credentials
    finally:
        reset_credentials(token)
