"""
Prometheus 메트릭 모듈

업스트림 버전 조회 결과와 소요 시간 메트릭을 수집합니다.
"""

import platform
import sys
from typing import Any, Dict

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, Info

from ..models.enums import ErrorKind
from ..utils.logging import get_logger

# 메트릭 레지스트리
REGISTRY = CollectorRegistry()

logger = get_logger(__name__)

LIST_REQUESTS = Counter(
    'upstream_list_requests_total',
    '업스트림 버전 조회 요청 수',
    ['outcome'],
    registry=REGISTRY
)

LIST_DURATION = Histogram(
    'upstream_list_duration_seconds',
    '업스트림 버전 조회 소요 시간 (초)',
    buckets=(0.1, 0.5, 1, 2.5, 5, 10, 30, 60, 120, 300),
    registry=REGISTRY
)

ACTIVE_LOOKUPS = Gauge(
    'upstream_active_lookups',
    '진행 중인 업스트림 조회 수',
    registry=REGISTRY
)

LISTER_INFO = Info(
    'upstream_lister',
    '업스트림 리스터 정보',
    registry=REGISTRY
)

LISTER_INFO.info({
    'python_version': f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
    'platform': platform.system()
})

SUCCESS_OUTCOME = "success"


def record_lookup(outcome: str, duration: float) -> None:
    """
    조회 결과 기록

    Args:
        outcome: "success" 또는 ErrorKind 값
        duration: 소요 시간 (초)
    """
    LIST_REQUESTS.labels(outcome=outcome).inc()
    LIST_DURATION.observe(duration)
    logger.debug(f"조회 메트릭 기록: {outcome} ({duration:.3f}초)")


def lookup_count(outcome: str) -> float:
    """결과별 누적 조회 수 (테스트 및 상태 보고용)"""
    value = REGISTRY.get_sample_value('upstream_list_requests_total', {'outcome': outcome})
    return value or 0.0


def get_metrics_summary() -> Dict[str, Any]:
    """
    메트릭 요약 정보 반환

    Returns:
        메트릭 요약 딕셔너리
    """
    outcomes = [SUCCESS_OUTCOME] + [kind.value for kind in ErrorKind]
    return {
        "requests": {outcome: lookup_count(outcome) for outcome in outcomes},
        "active": REGISTRY.get_sample_value('upstream_active_lookups') or 0.0,
    }
