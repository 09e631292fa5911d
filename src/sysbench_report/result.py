"""Parsed sysbench report dataclass."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


@dataclass
class SysbenchResult:
    """Metrics extracted from one sysbench report.

    Every field starts at its zero value and is only overwritten when a
    matching report line is seen. Field order is the output order.
    """

    engine_version: str = ""        # sysbench version, e.g. "1.0.9"
    runtime_version: str = ""       # bundled LuaJIT version
    threads: int = 0
    total_read: int = 0
    total_write: int = 0
    total_other: int = 0
    total_transactions: int = 0
    transactions_per_second: float = 0.0
    total_queries: int = 0
    queries_per_second: float = 0.0
    ignored_errors: int = 0
    reconnects: int = 0
    total_time_seconds: float = 0.0
    total_events: int = 0
    min_latency_ms: float = 0.0
    avg_latency_ms: float = 0.0
    max_latency_ms: float = 0.0
    p95_latency_ms: float = 0.0
    sum_latency_ms: float = 0.0
    per_thread_events_avg: float = 0.0
    per_thread_events_stddev: float = 0.0
    per_thread_exec_time_avg: float = 0.0
    per_thread_exec_time_stddev: float = 0.0

    def values(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in FIELD_NAMES)

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in FIELD_NAMES}


FIELD_NAMES: Tuple[str, ...] = tuple(f.name for f in fields(SysbenchResult))
