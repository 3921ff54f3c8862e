"""
설정 관리 모듈

환경 변수를 통한 시스템 설정을 관리합니다.
"""

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationException


class Settings(BaseSettings):
    """시스템 설정 관리 클래스"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # 환경 변수 이름 대소문자 구분 안 함
        case_sensitive=False,
        extra="ignore"
    )

    # 외부 도구 설정
    go_binary_path: str = Field(
        default="go",
        description="go 바이너리 경로"
    )
    go_env: list[str] = Field(
        default_factory=list,
        description="go 명령에 전달할 기본 환경 변수 목록 (KEY=VALUE)"
    )

    # 인증 전파 설정
    propagate_auth: bool = Field(
        default=False,
        description="호출자 인증 정보를 go 명령에 전달할지 여부"
    )
    propagate_auth_patterns: list[str] = Field(
        default_factory=list,
        description="인증 정보를 전달할 호스트 패턴 목록 (glob)"
    )

    # 실행 설정
    list_timeout: int = Field(
        default=300,
        description="버전 조회 타임아웃 (초, 0이면 제한 없음)"
    )
    terminate_grace_period: float = Field(
        default=0.5,
        description="SIGTERM 후 SIGKILL까지 대기 시간 (초)"
    )
    temp_root: Optional[str] = Field(
        default=None,
        description="샌드박스 임시 디렉토리 상위 경로 (None이면 시스템 기본값)"
    )

    # 로깅 설정
    log_level: str = Field(
        default="INFO",
        description="로그 레벨"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="로그 포맷"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="로그 파일 경로"
    )

    # 메트릭 설정
    metrics_enabled: bool = Field(
        default=True,
        description="조회 메트릭 수집 여부"
    )

    def validate_configuration(self) -> None:
        """설정 유효성 검증"""
        for entry in self.go_env:
            key, sep, _ = entry.partition("=")
            if not sep or not key:
                raise ConfigurationException(
                    "GO_ENV", f"KEY=VALUE 형식이어야 합니다: {entry!r}"
                )

        for pattern in self.propagate_auth_patterns:
            if not pattern.strip():
                raise ConfigurationException(
                    "PROPAGATE_AUTH_PATTERNS", "빈 패턴은 허용되지 않습니다"
                )

        if self.list_timeout < 0:
            raise ConfigurationException("LIST_TIMEOUT", "0 이상이어야 합니다")

        if self.terminate_grace_period < 0:
            raise ConfigurationException("TERMINATE_GRACE_PERIOD", "0 이상이어야 합니다")

        if self.temp_root:
            os.makedirs(self.temp_root, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    """
    설정 인스턴스를 반환합니다 (싱글톤 패턴)

    목록 필드(GO_ENV, PROPAGATE_AUTH_PATTERNS)는 환경 변수에서 JSON 배열로
    읽습니다. 해석할 수 없는 값은 ConfigurationException으로 보고합니다.

    Returns:
        Settings: 설정 인스턴스

    Raises:
        ConfigurationException: 환경 변수 해석 또는 유효성 검증 실패
    """
    try:
        settings = Settings()
    except ValueError as e:
        # SettingsError(JSON 해석 실패)와 ValidationError 모두 ValueError 하위 클래스
        raise ConfigurationException("environment", str(e)) from e
    settings.validate_configuration()
    return settings
