"""
Dimension adapters - feed a handler from the whole screen or a local box.

Both adapters hold no state of their own. Caching and change
notification live in the BreakpointsHandler they wrap.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from responsive_size.core.constraints import BoxConstraints
from responsive_size.core.handler import BreakpointsHandler
from responsive_size.screen.data import ScreenSizeData
from responsive_size.screen.metrics import ScreenMetrics, TerminalMetrics

T = TypeVar("T")
K = TypeVar("K", bound=Enum)

MetricsSource = Callable[[], ScreenMetrics]


class ScreenValueResolver(Generic[T, K]):
    """
    Global adapter: classify by the device's width or shortest side.

    Args:
        handler: Handler that owns the value map and cache
        metrics_source: Callable returning current metrics
            (defaults to the terminal size)
        use_shortest_side: Classify by min(width, height) instead of width
    """

    def __init__(
        self,
        handler: BreakpointsHandler[T, K],
        metrics_source: MetricsSource = TerminalMetrics.read,
        use_shortest_side: bool = False,
    ):
        self.handler = handler
        self.metrics_source = metrics_source
        self.use_shortest_side = use_shortest_side

    def data(self, metrics: Optional[ScreenMetrics] = None) -> ScreenSizeData[K]:
        """Classify current (or given) metrics without resolving a value."""
        if metrics is None:
            metrics = self.metrics_source()
        return ScreenSizeData.from_metrics(
            metrics, self.handler.breakpoints, use_shortest_side=self.use_shortest_side
        )

    def resolve(self, metrics: Optional[ScreenMetrics] = None) -> T:
        """Resolve the value for current (or given) metrics."""
        return self.handler.get_screen_size_value(self.data(metrics).screen_size)


class LayoutValueResolver(Generic[T, K]):
    """
    Local adapter: classify by the box a nested layout was given.

    Lets a panel make its own responsive decision independent of the
    overall screen size.
    """

    def __init__(self, handler: BreakpointsHandler[T, K], use_shortest_side: bool = False):
        self.handler = handler
        self.use_shortest_side = use_shortest_side

    def resolve(self, constraints: BoxConstraints) -> T:
        return self.handler.get_layout_size_value(
            constraints, use_shortest_side=self.use_shortest_side
        )

    def resolve_size(self, width: float, height: float) -> T:
        """Shorthand for ``resolve(BoxConstraints.loose(width, height))``."""
        return self.resolve(BoxConstraints.loose(width, height))
