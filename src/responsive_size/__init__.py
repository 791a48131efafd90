"""
responsive-size: breakpoint classification for adaptive interfaces

Turn a width (or shortest side) into a size category, and a sparse
category -> value map into a concrete value.

Quick Start:
    >>> import responsive_size as rs
    >>> rs.get_screen_size(1000, rs.Breakpoints.DEFAULT)
    <LayoutSize.LARGE: 'large'>
    >>> columns = rs.BreakpointsHandler.standard(small=1, medium=2, extra_large=4)
    >>> columns.get_screen_size_value(rs.LayoutSize.LARGE)
    2

Features:
    - Standard (5) and granular (13) category scales with custom thresholds
    - Fallback to the nearest smaller configured category
    - Cached lookups with change notification
    - Global (screen) and local (box constraints) dimension sources
    - Portrait/landscape value maps
    - JSON configuration and a command line tool
"""

__version__ = "0.1.0"

# Categories and tables
from responsive_size.core.sizes import LayoutSize, LayoutSizeGranular
from responsive_size.core.breakpoints import Breakpoints, BreakpointsGranular
from responsive_size.core.classifier import get_screen_size

# Resolution
from responsive_size.core.constraints import BoxConstraints
from responsive_size.core.handler import BreakpointsHandler
from responsive_size.core.orientation import Orientation, OrientationBreakpointsHandler

# Errors
from responsive_size.core.errors import (
    BreakpointConfigError,
    BreakpointError,
    EmptyValuesError,
    UnresolvableValueError,
)

# Adapters
from responsive_size.screen.adapters import LayoutValueResolver, ScreenValueResolver
from responsive_size.screen.data import ScreenSizeData
from responsive_size.screen.metrics import ScreenMetrics

# Configuration
from responsive_size.config import ResponsiveConfig, load_config

__all__ = [
    # Version
    "__version__",
    # Categories and tables
    "LayoutSize",
    "LayoutSizeGranular",
    "Breakpoints",
    "BreakpointsGranular",
    "get_screen_size",
    # Resolution
    "BoxConstraints",
    "BreakpointsHandler",
    "Orientation",
    "OrientationBreakpointsHandler",
    # Errors
    "BreakpointError",
    "BreakpointConfigError",
    "EmptyValuesError",
    "UnresolvableValueError",
    # Adapters
    "LayoutValueResolver",
    "ScreenValueResolver",
    "ScreenSizeData",
    "ScreenMetrics",
    # Configuration
    "ResponsiveConfig",
    "load_config",
]
