from __future__ import annotations
import time
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, generate_latest, CONTENT_TYPE_LATEST

class LookupMetrics:
    """Request, latency and concurrency instrumentation for the lookup handlers.

    Each instance owns its registry; series are never shared between apps.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()
        self.calls = Counter(
            'function_calls', 'Handler invocations by outcome',
            ['function', 'result'], registry=self.registry,
        )
        self.duration = Histogram(
            'function_calls_duration_seconds', 'Handler latency',
            ['function'], registry=self.registry,
        )
        self.concurrent = Gauge(
            'function_calls_concurrent', 'Handler invocations in flight',
            ['function'], registry=self.registry,
        )

    @contextmanager
    def track(self, function: str) -> Iterator[None]:
        in_flight = self.concurrent.labels(function=function)
        in_flight.inc()
        start = time.perf_counter()
        result = 'error'
        try:
            yield
            result = 'ok'
        finally:
            self.duration.labels(function=function).observe(time.perf_counter() - start)
            self.calls.labels(function=function, result=result).inc()
            in_flight.dec()

    def render(self) -> Tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
