"""
Prometheus metrics for pulse gates.

Tracks how many pulses were forwarded, suppressed or rejected by the sink,
and the last estimated lag of a suppressed pulse.
"""

from typing import Optional
from enum import Enum
import threading

from prometheus_client import CollectorRegistry, Counter, Gauge, REGISTRY


class PulseOutcome(str, Enum):
    """What happened to a pulse."""
    FORWARDED = "forwarded"
    SUPPRESSED = "suppressed"
    FAILED = "failed"


class GateMetrics:
    """
    Metrics collector for gates.
    
    Each instance registers its collectors on one registry, so tests can
    pass a fresh CollectorRegistry while production shares get_metrics().
    """
    
    def __init__(self, registry: Optional[CollectorRegistry] = None):
        """
        Initialize metrics collector.
        
        Args:
            registry: Prometheus registry (defaults to the global one)
        """
        self.registry = registry if registry is not None else REGISTRY
        
        self.pulses = Counter(
            'pulsegate_pulses_total',
            'Pulses seen by gates',
            ['outcome'],
            registry=self.registry
        )
        
        self.estimated_lag = Gauge(
            'pulsegate_estimated_lag_ms',
            'Estimated lag of the last suppressed pulse in milliseconds',
            registry=self.registry
        )
    
    def record_forwarded(self) -> None:
        """Record a pulse passed to the sink."""
        self.pulses.labels(outcome=PulseOutcome.FORWARDED.value).inc()
    
    def record_suppressed(self, lag_ms: int) -> None:
        """Record a pulse held back, with its estimated lag."""
        self.pulses.labels(outcome=PulseOutcome.SUPPRESSED.value).inc()
        self.estimated_lag.set(lag_ms)
    
    def record_failed(self) -> None:
        """Record a pulse the sink failed on."""
        self.pulses.labels(outcome=PulseOutcome.FAILED.value).inc()


# Global metrics
_metrics: Optional[GateMetrics] = None
_metrics_lock = threading.Lock()


def get_metrics() -> GateMetrics:
    """
    Get the global metrics collector.
    
    Returns:
        GateMetrics registered on the default registry
    """
    global _metrics
    
    with _metrics_lock:
        if _metrics is None:
            _metrics = GateMetrics()
    
    return _metrics
