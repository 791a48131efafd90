"""ScreenSizeData - snapshot of a classified screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from responsive_size.core.breakpoints import BaseBreakpoints
from responsive_size.core.classifier import current_breakpoint, get_screen_size
from responsive_size.core.orientation import Orientation
from responsive_size.screen.metrics import ScreenMetrics

K = TypeVar("K", bound=Enum)


class ScreenSizeAspect(Enum):
    """What changed between two snapshots."""
    SCREEN_SIZE = "screenSize"  # the category itself
    OTHER = "other"             # metrics only, same category


@dataclass(frozen=True)
class ScreenSizeData(Generic[K]):
    """
    Everything known about the screen at one point in time.

    Snapshots are compared by value. Consumers that only care about
    the category can ignore changes reported as ``ScreenSizeAspect.OTHER``.
    """
    breakpoints: BaseBreakpoints[K]
    current_breakpoint: float
    screen_size: K
    physical_width: float
    physical_height: float
    device_pixel_ratio: float
    logical_screen_width: float
    logical_screen_height: float
    orientation: Orientation

    @classmethod
    def from_metrics(
        cls,
        metrics: ScreenMetrics,
        breakpoints: BaseBreakpoints[K],
        use_shortest_side: bool = False,
    ) -> ScreenSizeData[K]:
        """Classify ``metrics`` and capture the result."""
        screen_size = get_screen_size(metrics.dimension(use_shortest_side), breakpoints)
        return cls(
            breakpoints=breakpoints,
            current_breakpoint=current_breakpoint(screen_size, breakpoints),
            screen_size=screen_size,
            physical_width=metrics.physical_width,
            physical_height=metrics.physical_height,
            device_pixel_ratio=metrics.device_pixel_ratio,
            logical_screen_width=metrics.logical_width,
            logical_screen_height=metrics.logical_height,
            orientation=metrics.orientation,
        )

    def changed_from(self, previous: Optional[ScreenSizeData[K]]) -> set[ScreenSizeAspect]:
        """Aspects that differ from ``previous`` (both when there is none)."""
        if previous is None:
            return {ScreenSizeAspect.SCREEN_SIZE, ScreenSizeAspect.OTHER}
        if previous == self:
            return set()
        if previous.screen_size != self.screen_size:
            return {ScreenSizeAspect.SCREEN_SIZE, ScreenSizeAspect.OTHER}
        return {ScreenSizeAspect.OTHER}

    def to_dict(self) -> dict:
        """JSON-friendly view."""
        return {
            "screenSize": self.screen_size.value,
            "currentBreakpoint": self.current_breakpoint,
            "logicalScreenWidth": self.logical_screen_width,
            "logicalScreenHeight": self.logical_screen_height,
            "physicalWidth": self.physical_width,
            "physicalHeight": self.physical_height,
            "devicePixelRatio": self.device_pixel_ratio,
            "orientation": self.orientation.value,
        }
