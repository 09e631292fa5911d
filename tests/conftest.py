"""Pytest fixtures for sysbench report tests."""

from pathlib import Path

import pytest

from sysbench_report import SysbenchResult

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def sample1_plain():
    return (
        "1.0.9 2.0.4 16 24833060 7095097 3547560 1773770 5912.460 35475717 "
        "118250.340 20 0 300.003 1773770 2.240 2.700 79.970 3.250 4796635.380 "
        "110860.625 959.190 299.790 0.000"
    )


@pytest.fixture(scope="session")
def sample_path():
    """Canonical sysbench 1.0.9 OLTP report (16 threads, 300s)."""
    return DATA_DIR / "sample1.txt"


@pytest.fixture(scope="session")
def sample_text(sample_path):
    return sample_path.read_text(encoding="utf-8")


@pytest.fixture
def expected_sample1():
    return SysbenchResult(
        engine_version="1.0.9",
        runtime_version="2.0.4",
        threads=16,
        total_read=24833060,
        total_write=7095097,
        total_other=3547560,
        total_transactions=1773770,
        transactions_per_second=5912.46,
        total_queries=35475717,
        queries_per_second=118250.34,
        ignored_errors=20,
        reconnects=0,
        total_time_seconds=300.0032,
        total_events=1773770,
        min_latency_ms=2.24,
        avg_latency_ms=2.7,
        max_latency_ms=79.97,
        p95_latency_ms=3.25,
        sum_latency_ms=4796635.38,
        per_thread_events_avg=110860.625,
        per_thread_events_stddev=959.19,
        per_thread_exec_time_avg=299.7897,
        per_thread_exec_time_stddev=0.0,
    )
