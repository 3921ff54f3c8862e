"""
열거형 정의 모듈

업스트림 리스터에서 사용되는 상수 값들을 열거형으로 정의합니다.
"""

from enum import Enum


class ErrorKind(Enum):
    """오류 종류 열거형"""
    NOT_FOUND = "not_found"
    INTERNAL = "internal"
    CANCELLED = "cancelled"
    DEADLINE_EXCEEDED = "deadline_exceeded"
    BAD_REQUEST = "bad_request"
