"""Device metrics - where global dimensions come from."""

from __future__ import annotations

import os
from dataclasses import dataclass

from responsive_size.core.orientation import Orientation


@dataclass(frozen=True)
class ScreenMetrics:
    """
    Logical size of a screen plus its pixel density.

    Logical units are what breakpoints are expressed in. Physical
    pixels are logical units times ``device_pixel_ratio``.
    """
    logical_width: float
    logical_height: float
    device_pixel_ratio: float = 1.0

    def __post_init__(self) -> None:
        if self.logical_width < 0 or self.logical_height < 0:
            raise ValueError(
                f"Screen size must be >= 0, got {self.logical_width}x{self.logical_height}"
            )
        if self.device_pixel_ratio <= 0:
            raise ValueError(f"device_pixel_ratio must be > 0, got {self.device_pixel_ratio}")

    @classmethod
    def from_physical(
        cls, physical_width: float, physical_height: float, device_pixel_ratio: float = 1.0
    ) -> ScreenMetrics:
        """Build metrics from a physical pixel size."""
        if device_pixel_ratio <= 0:
            raise ValueError(f"device_pixel_ratio must be > 0, got {device_pixel_ratio}")
        return cls(
            physical_width / device_pixel_ratio,
            physical_height / device_pixel_ratio,
            device_pixel_ratio,
        )

    @property
    def physical_width(self) -> float:
        return self.logical_width * self.device_pixel_ratio

    @property
    def physical_height(self) -> float:
        return self.logical_height * self.device_pixel_ratio

    @property
    def shortest_side(self) -> float:
        return min(self.logical_width, self.logical_height)

    @property
    def orientation(self) -> Orientation:
        return Orientation.from_size(self.logical_width, self.logical_height)

    def dimension(self, use_shortest_side: bool = False) -> float:
        """Width, or the shortest side."""
        return self.shortest_side if use_shortest_side else self.logical_width


class TerminalMetrics:
    """Reads metrics from the controlling terminal (columns x rows)."""

    DEFAULT_COLUMNS = 80
    DEFAULT_ROWS = 24

    @staticmethod
    def read() -> ScreenMetrics:
        """Current terminal size, 80x24 when there is no terminal."""
        try:
            size = os.get_terminal_size()
            return ScreenMetrics(size.columns, size.lines)
        except OSError:
            return ScreenMetrics(TerminalMetrics.DEFAULT_COLUMNS, TerminalMetrics.DEFAULT_ROWS)
