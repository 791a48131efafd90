"""Core breakpoint classification and value resolution."""

from responsive_size.core.breakpoints import (
    CATCH_ALL_THRESHOLD,
    BaseBreakpoints,
    Breakpoints,
    BreakpointsGranular,
)
from responsive_size.core.classifier import current_breakpoint, get_screen_size
from responsive_size.core.constraints import BoxConstraints
from responsive_size.core.errors import (
    BreakpointConfigError,
    BreakpointError,
    EmptyValuesError,
    UnresolvableValueError,
)
from responsive_size.core.handler import BreakpointsHandler
from responsive_size.core.orientation import (
    Orientation,
    OrientationBreakpointsHandler,
    pick_orientation,
    resolve_orientation_values,
)
from responsive_size.core.sizes import LayoutSize, LayoutSizeGranular, parse_size

__all__ = [
    "CATCH_ALL_THRESHOLD",
    "BaseBreakpoints",
    "Breakpoints",
    "BreakpointsGranular",
    "get_screen_size",
    "current_breakpoint",
    "BoxConstraints",
    "BreakpointError",
    "BreakpointConfigError",
    "EmptyValuesError",
    "UnresolvableValueError",
    "BreakpointsHandler",
    "Orientation",
    "OrientationBreakpointsHandler",
    "pick_orientation",
    "resolve_orientation_values",
    "LayoutSize",
    "LayoutSizeGranular",
    "parse_size",
]
