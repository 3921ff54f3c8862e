"""
모니터링 패키지

업스트림 조회 Prometheus 메트릭을 제공합니다.
"""

from .metrics import (
    ACTIVE_LOOKUPS,
    LIST_DURATION,
    LIST_REQUESTS,
    REGISTRY,
    SUCCESS_OUTCOME,
    get_metrics_summary,
    lookup_count,
    record_lookup,
)

__all__ = [
    "REGISTRY",
    "LIST_REQUESTS",
    "LIST_DURATION",
    "ACTIVE_LOOKUPS",
    "SUCCESS_OUTCOME",
    "record_lookup",
    "lookup_count",
    "get_metrics_summary",
]
