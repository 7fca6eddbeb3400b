"""
Gate - lets pulses through only at the right moment.

A gate pairs a schedule with a downstream sink. On every pulse it reads
the current UTC instant: when the schedule matches, the context goes to
the sink as is; otherwise the pulse is dropped and the estimated lag is
logged. Whatever the sink raises reaches the caller unchanged.
"""

from typing import Any, Callable, Optional, Protocol, Union

from pulsegate.core.config import get_config
from pulsegate.core.observability import GateMetrics, get_metrics
from pulsegate.logging import StructuredLogger, get_logger
from pulsegate.scheduler.clock import Clock, SystemClock
from pulsegate.scheduler.fields import format_duration
from pulsegate.scheduler.schedule import Schedule


class Sink(Protocol):
    """Downstream receiver of forwarded pulses."""
    
    def accept(self, context: Any) -> None:
        ...


class FunctionSink:
    """
    Sink backed by a plain callable.
    
    Example:
        >>> gate = Gate("@hourly", FunctionSink(print))
    """
    
    def __init__(self, func: Callable[[Any], Any], name: Optional[str] = None):
        """
        Wrap a callable.
        
        Args:
            func: Called with the pulse context
            name: Name used in logs (defaults to the function name)
        """
        self.func = func
        self.name = name or getattr(func, "__name__", repr(func))
    
    def accept(self, context: Any) -> None:
        self.func(context)
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FunctionSink):
            return NotImplemented
        return self.func == other.func
    
    def __hash__(self) -> int:
        return hash(self.func)
    
    def __repr__(self) -> str:
        return f"FunctionSink({self.name})"


class Gate:
    """
    Pulse filter driven by a cron-style schedule.
    
    The gate keeps no state between pulses, so one instance may be
    pulsed from many threads at once.
    
    Example:
        >>> gate = Gate("0 9 * * *", sink)
        >>> gate.pulse({"job": "report"})  # forwarded only at 09:00 UTC
    """
    
    def __init__(
        self,
        schedule: Union[str, Schedule],
        sink: Sink,
        clock: Optional[Clock] = None,
        logger: Optional[StructuredLogger] = None,
        metrics: Optional[GateMetrics] = None
    ):
        """
        Initialize gate.
        
        Args:
            schedule: Schedule text (or an already built Schedule)
            sink: Receiver of forwarded pulses, shared not owned
            clock: Source of the current instant (defaults to UTC wall clock)
            logger: Logger for diagnostics
            metrics: Metrics collector (defaults to the global one when enabled)
            
        Raises:
            InvalidScheduleError: If the schedule does not have five fields
            InvalidExpressionError: If a field cannot be parsed
        """
        self.schedule = schedule if isinstance(schedule, Schedule) else Schedule(schedule)
        self.sink = sink
        self.clock = clock or SystemClock()
        self.logger = logger or get_logger(__name__)
        
        if metrics is None and get_config().metrics_enabled:
            metrics = get_metrics()
        self.metrics = metrics
    
    def pulse(self, context: Any) -> None:
        """
        Forward the context to the sink if the moment is right.
        
        Args:
            context: Opaque pulse payload, passed through unmodified
            
        Raises:
            Exception: Anything the sink raises, unchanged
        """
        now = self.clock.now()
        
        if not self.schedule.matches(now):
            lag = self.schedule.estimated_lag(now)
            if self.metrics is not None:
                self.metrics.record_suppressed(lag)
            self.logger.info(
                f"Not the right moment, see you again in {format_duration(lag)}",
                schedule=self.schedule.text,
                lag_ms=lag
            )
            return
        
        try:
            self.sink.accept(context)
        except Exception as e:
            if self.metrics is not None:
                self.metrics.record_failed()
            self.logger.error(
                "Sink rejected pulse",
                schedule=self.schedule.text,
                sink=repr(self.sink),
                error=str(e)
            )
            raise
        
        if self.metrics is not None:
            self.metrics.record_forwarded()
        self.logger.debug(
            "Pulse forwarded",
            schedule=self.schedule.text,
            sink=repr(self.sink)
        )
    
    def estimated_lag(self) -> int:
        """Estimated milliseconds until the next opportunity, from now."""
        return self.schedule.estimated_lag(self.clock.now())
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gate):
            return NotImplemented
        return self.schedule == other.schedule and self.sink == other.sink
    
    def __hash__(self) -> int:
        return hash(self.schedule)
    
    def __str__(self) -> str:
        return f"{self.sink} in {format_duration(self.estimated_lag())}"
    
    def __repr__(self) -> str:
        return f"Gate(schedule='{self.schedule.text}', sink={self.sink!r})"
