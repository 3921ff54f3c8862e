#!/usr/bin/env python3
"""
업스트림 리스터 사용 예제

VCSLister로 여러 모듈을 동시에 조회하고, 인증 컨텍스트를 설정하며,
오류 종류별로 결과를 처리하는 과정을 보여주는 예제입니다.
go가 PATH에 있어야 합니다.
"""

import asyncio

from upstream_lister.auth.context import credentials_scope
from upstream_lister.config.settings import get_settings
from upstream_lister.exceptions import UpstreamListerException, error_kind
from upstream_lister.lister.vcs_lister import VCSLister
from upstream_lister.monitoring.metrics import get_metrics_summary
from upstream_lister.utils.logging import get_logger, setup_logging

logger = get_logger("examples")

MODULES = [
    "github.com/pkg/errors",
    "golang.org/x/mod",
    "example.org/does-not-exist",
]


async def lookup(lister: VCSLister, module_path: str) -> None:
    """단일 모듈 조회 후 결과 출력"""
    try:
        rev, versions = await lister.list(module_path, timeout=60)
        logger.info(f"{module_path}: 최신 {rev.version} ({rev.time:%Y-%m-%d}), 전체 {len(versions)}개")
    except UpstreamListerException as e:
        logger.warning(f"{module_path}: {error_kind(e).value} - {e.message}")


async def concurrent_lookup_example(lister: VCSLister) -> None:
    """여러 모듈 동시 조회 예제"""
    await asyncio.gather(*(lookup(lister, module) for module in MODULES))


async def private_module_example(lister: VCSLister) -> None:
    """인증 정보 전파 예제 (PROPAGATE_AUTH, PROPAGATE_AUTH_PATTERNS 설정 필요)"""
    with credentials_scope("deploy-bot", "token-from-request"):
        await lookup(lister, "git.corp.internal/team/private-module")


async def main():
    """예제 메인 함수"""
    settings = get_settings()
    setup_logging(settings)
    lister = VCSLister.from_settings(settings)

    await concurrent_lookup_example(lister)
    await private_module_example(lister)

    logger.info(f"메트릭 요약: {get_metrics_summary()}")


if __name__ == "__main__":
    asyncio.run(main())
