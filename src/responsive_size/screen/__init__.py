"""Dimension sources and adapters."""

from responsive_size.screen.adapters import LayoutValueResolver, ScreenValueResolver
from responsive_size.screen.data import ScreenSizeAspect, ScreenSizeData
from responsive_size.screen.metrics import ScreenMetrics, TerminalMetrics

__all__ = [
    "LayoutValueResolver",
    "ScreenValueResolver",
    "ScreenSizeAspect",
    "ScreenSizeData",
    "ScreenMetrics",
    "TerminalMetrics",
]
