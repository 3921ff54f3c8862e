"""
응답 디코더 모듈

`go list -m -versions -json` 출력에서 첫 번째 JSON 레코드를 읽어
RevisionInfo와 버전 목록으로 변환합니다.
"""

import json
from typing import Optional, Tuple

from pydantic import ValidationError

from ..exceptions import InternalException
from ..models.base import ListResponse, RevisionInfo, VersionList

_decoder = json.JSONDecoder()


def decode_list_response(stdout: str, op: Optional[str] = None) -> Tuple[RevisionInfo, VersionList]:
    """
    go 명령 출력 디코딩

    첫 번째 JSON 객체만 사용하며 그 뒤의 내용은 무시합니다.

    Args:
        stdout: go 명령 표준 출력
        op: 오류에 기록할 작업 이름

    Returns:
        (RevisionInfo, 버전 목록) 튜플. 버전 목록이 없으면 빈 리스트

    Raises:
        InternalException: 출력이 비었거나 형식이 잘못된 경우
    """
    text = stdout.lstrip()
    if not text:
        raise InternalException("go list 출력이 비어 있습니다", op)

    try:
        record, _ = _decoder.raw_decode(text)
    except json.JSONDecodeError as e:
        raise InternalException(f"go list 출력 파싱 실패: {e}", op) from e

    if not isinstance(record, dict):
        raise InternalException(f"go list 출력이 객체가 아닙니다: {type(record).__name__}", op)

    try:
        response = ListResponse.model_validate(record)
    except ValidationError as e:
        raise InternalException(f"go list 레코드 검증 실패: {e}", op) from e

    rev = RevisionInfo(version=response.version, time=response.time)
    return rev, list(response.versions)
