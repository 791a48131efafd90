"""Box constraints handed down by a local layout pass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BoxConstraints:
    """
    Extents available to a nested region.

    Only the maximum extents take part in classification. A panel
    occupying a third of a wide window classifies by its own width,
    not the window's.
    """
    max_width: float
    max_height: float
    min_width: float = 0.0
    min_height: float = 0.0

    def __post_init__(self) -> None:
        for name in ("max_width", "max_height", "min_width", "min_height"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.min_width > self.max_width or self.min_height > self.max_height:
            raise ValueError(
                f"Minimum extents ({self.min_width}x{self.min_height}) exceed "
                f"maximum extents ({self.max_width}x{self.max_height})"
            )

    @classmethod
    def loose(cls, width: float, height: float) -> "BoxConstraints":
        """Constraints allowing anything up to ``width`` x ``height``."""
        return cls(max_width=width, max_height=height)

    @classmethod
    def tight(cls, width: float, height: float) -> "BoxConstraints":
        """Constraints requiring exactly ``width`` x ``height``."""
        return cls(max_width=width, max_height=height, min_width=width, min_height=height)

    @property
    def is_tight(self) -> bool:
        return self.min_width == self.max_width and self.min_height == self.max_height

    @property
    def shortest_side(self) -> float:
        return min(self.max_width, self.max_height)

    @property
    def longest_side(self) -> float:
        return max(self.max_width, self.max_height)

    def dimension(self, use_shortest_side: bool = False) -> float:
        """Reduce the box to the single dimension used for classification."""
        return self.shortest_side if use_shortest_side else self.max_width
