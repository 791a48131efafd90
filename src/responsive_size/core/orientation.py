"""Orientation-aware value maps."""

from enum import Enum
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from responsive_size.core.breakpoints import BaseBreakpoints, Breakpoints
from responsive_size.core.constraints import BoxConstraints
from responsive_size.core.errors import EmptyValuesError
from responsive_size.core.handler import BreakpointsHandler, has_any_value

T = TypeVar("T")
K = TypeVar("K", bound=Enum)
V = TypeVar("V")


class Orientation(Enum):
    """Screen or box orientation."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @classmethod
    def from_size(cls, width: float, height: float) -> "Orientation":
        """Landscape when wider than tall, portrait otherwise."""
        return cls.LANDSCAPE if width > height else cls.PORTRAIT


def pick_orientation(
    orientation: Orientation,
    has_portrait: bool,
    has_landscape: bool,
) -> Orientation:
    """
    Orientation whose values to use.

    The requested orientation when it has values, otherwise the other
    one. Raises EmptyValuesError when neither has any.
    """
    other = (
        Orientation.PORTRAIT if orientation == Orientation.LANDSCAPE else Orientation.LANDSCAPE
    )
    available = {Orientation.PORTRAIT: has_portrait, Orientation.LANDSCAPE: has_landscape}
    for candidate in (orientation, other):
        if available[candidate]:
            return candidate

    raise EmptyValuesError(
        "At least one breakpoint value must be provided for portrait or landscape"
    )


def resolve_orientation_values(
    orientation: Orientation,
    portrait: Mapping[Any, Optional[V]],
    landscape: Mapping[Any, Optional[V]],
) -> Mapping[Any, Optional[V]]:
    """
    Pick the value map for an orientation.

    Falls back to the other orientation's map when the preferred one
    has no values. Raises EmptyValuesError when neither has any.
    """
    picked = pick_orientation(orientation, has_any_value(portrait), has_any_value(landscape))
    return portrait if picked == Orientation.PORTRAIT else landscape


class OrientationBreakpointsHandler(Generic[T, K]):
    """
    Pair of handlers, one per orientation.

    Each orientation keeps its own cache, so flipping orientation and
    back does not re-notify for a category already seen in that
    orientation. An orientation without values borrows the other one's
    handler.
    """

    def __init__(
        self,
        portrait: Mapping[Any, Optional[T]],
        landscape: Mapping[Any, Optional[T]],
        breakpoints: BaseBreakpoints[K] = Breakpoints.DEFAULT,  # type: ignore[assignment]
        on_changed: Optional[Callable[[K], None]] = None,
    ):
        self.breakpoints = breakpoints
        self._handlers: dict[Orientation, BreakpointsHandler[T, K]] = {}

        for orientation, values in (
            (Orientation.PORTRAIT, portrait),
            (Orientation.LANDSCAPE, landscape),
        ):
            if has_any_value(values):
                self._handlers[orientation] = BreakpointsHandler(
                    values, breakpoints=breakpoints, on_changed=on_changed
                )

        # Fails fast when neither orientation has values
        pick_orientation(Orientation.PORTRAIT, *self._has_values())

    def _has_values(self) -> tuple[bool, bool]:
        return (
            Orientation.PORTRAIT in self._handlers,
            Orientation.LANDSCAPE in self._handlers,
        )

    def handler_for(self, orientation: Orientation) -> BreakpointsHandler[T, K]:
        """Handler used for ``orientation``."""
        return self._handlers[pick_orientation(orientation, *self._has_values())]

    def get_screen_size_value(self, screen_size: K, orientation: Orientation) -> T:
        return self.handler_for(orientation).get_screen_size_value(screen_size)

    def get_layout_size_value(
        self,
        constraints: BoxConstraints,
        use_shortest_side: bool = False,
    ) -> T:
        """Resolve from a local box, taking orientation from its extents."""
        orientation = Orientation.from_size(constraints.max_width, constraints.max_height)
        return self.handler_for(orientation).get_layout_size_value(
            constraints, use_shortest_side=use_shortest_side
        )
