"""
명령줄 실행 모듈

`python -m upstream_lister <모듈 경로>` 형태로 단일 조회를 실행하고
결과를 JSON으로 출력합니다.
"""

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .config.settings import get_settings
from .exceptions import UpstreamListerException, error_kind
from .lister.vcs_lister import VCSLister
from .models.base import Credentials
from .models.enums import ErrorKind
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upstream-lister",
        description="go 명령으로 모듈의 업스트림 버전 목록을 조회합니다"
    )
    parser.add_argument("module", help="모듈 경로 (예: github.com/pkg/errors)")
    parser.add_argument("--timeout", type=float, default=None, help="조회 타임아웃 (초)")
    parser.add_argument("--user", default=None, help="전파할 인증 사용자")
    parser.add_argument("--password", default=None, help="전파할 인증 비밀번호")
    parser.add_argument("--log-level", default=None, help="로그 레벨 (기본값: 설정값)")
    return parser


async def run(module: str, credentials: Optional[Credentials], timeout: Optional[float]) -> dict:
    """단일 조회 실행 후 출력용 딕셔너리 반환"""
    lister = VCSLister.from_settings(get_settings())
    rev, versions = await lister.list(module, credentials=credentials, timeout=timeout)
    return {
        "Version": rev.version,
        "Time": rev.time.isoformat(),
        "Versions": versions,
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    """명령줄 메인 함수"""
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except UpstreamListerException as e:
        print(f"{error_kind(e).value}: {e}", file=sys.stderr)
        return 2
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    setup_logging(settings)

    credentials = None
    if args.user is not None:
        try:
            credentials = Credentials(user=args.user, password=args.password or "")
        except ValidationError as e:
            print(f"{ErrorKind.BAD_REQUEST.value}: {e}", file=sys.stderr)
            return 1

    try:
        result = asyncio.run(run(args.module, credentials, args.timeout))
    except UpstreamListerException as e:
        print(f"{error_kind(e).value}: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("조회 중단 요청")
        return 130

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
