"""
기본 데이터 모델 모듈

업스트림 버전 조회의 입력, 출력, 외부 도구 응답 구조를 정의합니다.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# 외부 도구가 보고한 순서 그대로의 버전 목록
VersionList = List[str]


class Credentials(BaseModel):
    """호출자 인증 정보 (사용자/비밀번호 쌍)"""

    model_config = ConfigDict(frozen=True)

    user: str = Field(
        ...,
        description="사용자 이름"
    )
    password: str = Field(
        ...,
        description="비밀번호",
        repr=False
    )

    @field_validator("user", "password")
    @classmethod
    def reject_whitespace(cls, value: str) -> str:
        # netrc 토큰은 공백으로 구분되므로 공백/개행이 들어가면 다른 항목이 생긴다
        if any(c.isspace() for c in value):
            raise ValueError("인증 정보에 공백 문자를 포함할 수 없습니다")
        return value


class ModuleVersionQuery(BaseModel):
    """모듈 버전 조회 요청 데이터 모델"""

    model_config = ConfigDict(frozen=True)

    module_path: str = Field(
        ...,
        description="조회할 모듈 경로 (첫 세그먼트는 호스트)",
        min_length=1
    )
    credentials: Optional[Credentials] = Field(
        default=None,
        description="호출자 인증 정보 (없으면 컨텍스트에서 조회)"
    )
    timeout: Optional[float] = Field(
        default=None,
        description="조회 마감 시간 (초, None이면 설정값 사용)",
        gt=0
    )

    @field_validator("module_path")
    @classmethod
    def validate_module_path(cls, value: str) -> str:
        if value.startswith("/"):
            raise ValueError("모듈 경로는 호스트로 시작해야 합니다")
        if any(c.isspace() for c in value):
            raise ValueError("모듈 경로에 공백을 포함할 수 없습니다")
        return value


class RevisionInfo(BaseModel):
    """최신 버전 메타데이터"""

    version: str = Field(
        ...,
        description="해석된 버전 식별자"
    )
    time: datetime = Field(
        ...,
        description="커밋/배포 시간"
    )


class ListResponse(BaseModel):
    """`go list -m -versions -json` 출력 레코드"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    path: str = Field(
        default="",
        alias="Path",
        description="모듈 경로"
    )
    version: str = Field(
        ...,
        alias="Version",
        description="해석된 버전"
    )
    versions: VersionList = Field(
        default_factory=list,
        alias="Versions",
        description="알려진 전체 버전 목록"
    )
    time: datetime = Field(
        ...,
        alias="Time",
        description="버전 시간"
    )

    @field_validator("versions", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value


class CommandResult(BaseModel):
    """외부 도구 실행 결과"""

    return_code: int = Field(
        ...,
        description="프로세스 종료 코드"
    )
    stdout: str = Field(
        default="",
        description="표준 출력"
    )
    stderr: str = Field(
        default="",
        description="표준 에러"
    )

    @property
    def succeeded(self) -> bool:
        return self.return_code == 0
