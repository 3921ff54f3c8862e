"""
공통 유틸리티 함수 모듈

모듈 경로 처리와 환경 변수 목록 변환 등의 헬퍼 함수를 제공합니다.
"""

from typing import Dict, Iterable


def fmt_mod_ver(module_path: str, version: str) -> str:
    """
    `모듈@버전` 형식 문자열 생성

    Args:
        module_path: 모듈 경로
        version: 버전 또는 심볼릭 버전 (예: latest)

    Returns:
        str: go 명령이 받는 모듈 쿼리 문자열
    """
    return f"{module_path}@{version}"


def host_of(module_path: str) -> str:
    """
    모듈 경로에서 첫 번째 경로 구분자 이전의 호스트 토큰 추출

    Args:
        module_path: 모듈 경로 (예: example.org/foo/bar)

    Returns:
        str: 호스트 토큰 (예: example.org)
    """
    return module_path.split("/", 1)[0]


def env_list_to_dict(entries: Iterable[str]) -> Dict[str, str]:
    """
    `KEY=VALUE` 목록을 딕셔너리로 변환 (뒤의 항목이 앞의 항목을 덮어씀)

    Args:
        entries: 환경 변수 문자열 목록

    Returns:
        Dict[str, str]: 환경 변수 매핑
    """
    env: Dict[str, str] = {}
    for entry in entries:
        key, sep, value = entry.partition("=")
        if not sep or not key:
            continue
        env[key] = value
    return env


def format_duration(seconds: float) -> str:
    """
    지속 시간을 사람이 읽기 쉬운 형태로 변환

    Args:
        seconds: 초 단위 시간

    Returns:
        str: 형식화된 시간 문자열
    """
    if seconds < 60:
        return f"{seconds:.2f}초"
    minutes = seconds // 60
    seconds = seconds % 60
    return f"{int(minutes)}분 {seconds:.1f}초"
