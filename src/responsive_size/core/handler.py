"""
BreakpointsHandler - resolve a value for a size category.

A handler binds one breakpoint table to a sparse ``{category: value}``
map. Lookups go through three tiers:

1. Cache: the same category as last time returns the last value
   without recomputing or notifying.
2. Direct match: the category's own value.
3. Fallback: the nearest *smaller* populated category, and failing
   that the last populated category in table order.

The last tier can hand back a value configured only for a larger
category, e.g. asking for ``EXTRA_SMALL`` when only ``EXTRA_LARGE`` is
set returns the ``EXTRA_LARGE`` value. Existing consumers rely on this.

Handlers mutate their cache on every miss and are not safe to share
between threads. Use one handler per use-site.
"""

import logging
from enum import Enum
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from responsive_size.core.breakpoints import BaseBreakpoints, Breakpoints, BreakpointsGranular
from responsive_size.core.classifier import get_screen_size
from responsive_size.core.constraints import BoxConstraints
from responsive_size.core.errors import (
    BreakpointConfigError,
    EmptyValuesError,
    UnresolvableValueError,
)
from responsive_size.core.sizes import LayoutSize, LayoutSizeGranular, parse_size

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K", bound=Enum)


def normalize_values(
    breakpoints: BaseBreakpoints[K],
    values: Mapping[Any, Optional[T]],
) -> dict[K, Optional[T]]:
    """
    Key ``values`` by the table's categories, in table order.

    Missing categories become None. Keys from another enumeration, or
    two keys naming the same category, raise BreakpointConfigError.
    """
    parsed: dict[K, Optional[T]] = {}
    for key, value in values.items():
        size = parse_size(breakpoints.size_enum, key)
        if size in parsed:
            raise BreakpointConfigError(f"Category {size.value!r} is assigned more than once")
        parsed[size] = value

    return {size: parsed.get(size) for size in breakpoints.values}  # type: ignore[misc]


def has_any_value(values: Mapping[Any, Any]) -> bool:
    return any(v is not None for v in values.values())


class BreakpointsHandler(Generic[T, K]):
    """
    Memoizing resolver from size category to value.

    Example:
        >>> handler = BreakpointsHandler.standard(small="mobile", large="desktop")
        >>> handler.get_screen_size_value(LayoutSize.MEDIUM)
        'mobile'
        >>> handler.get_screen_size_value(LayoutSize.EXTRA_LARGE)
        'desktop'
    """

    def __init__(
        self,
        values: Mapping[Any, Optional[T]],
        breakpoints: BaseBreakpoints[K] = Breakpoints.DEFAULT,  # type: ignore[assignment]
        on_changed: Optional[Callable[[K], None]] = None,
    ):
        self.breakpoints = breakpoints
        self.values = normalize_values(breakpoints, values)
        if not has_any_value(self.values):
            raise EmptyValuesError(
                f"{type(self).__name__} requires at least one "
                f"{breakpoints.size_enum.__name__} value to be set"
            )
        self.on_changed = on_changed

        # Cache pair, always assigned together
        self.screen_size_cache: Optional[K] = None
        self.current_value: Optional[T] = None

    @classmethod
    def standard(
        cls,
        extra_large: Optional[T] = None,
        large: Optional[T] = None,
        medium: Optional[T] = None,
        small: Optional[T] = None,
        extra_small: Optional[T] = None,
        breakpoints: Breakpoints = Breakpoints.DEFAULT,
        on_changed: Optional[Callable[[LayoutSize], None]] = None,
    ) -> "BreakpointsHandler[T, LayoutSize]":
        """Handler over the five standard categories."""
        return cls(
            {
                LayoutSize.EXTRA_LARGE: extra_large,
                LayoutSize.LARGE: large,
                LayoutSize.MEDIUM: medium,
                LayoutSize.SMALL: small,
                LayoutSize.EXTRA_SMALL: extra_small,
            },
            breakpoints=breakpoints,
            on_changed=on_changed,
        )

    @classmethod
    def granular(
        cls,
        breakpoints: BreakpointsGranular = BreakpointsGranular.DEFAULT,
        on_changed: Optional[Callable[[LayoutSizeGranular], None]] = None,
        **sizes: Optional[T],
    ) -> "BreakpointsHandler[T, LayoutSizeGranular]":
        """
        Handler over the thirteen granular categories.

        Values are passed by snake_case category name, e.g.
        ``BreakpointsHandler.granular(jumbo_large=4, compact_small=1)``.
        """
        return cls(sizes, breakpoints=breakpoints, on_changed=on_changed)

    def get_screen_size(self, dimension: float) -> K:
        """Classify a dimension against this handler's table."""
        return get_screen_size(dimension, self.breakpoints)

    def get_screen_size_value(self, screen_size: K) -> T:
        """Resolve the value for a category, using the cache when possible."""
        if screen_size not in self.values:
            raise BreakpointConfigError(
                f"{screen_size!r} is not a {self.breakpoints.size_enum.__name__} category"
            )

        if screen_size == self.screen_size_cache and self.current_value is not None:
            return self.current_value

        if self.on_changed is not None:
            self.on_changed(screen_size)

        value = self.values[screen_size]
        if value is None:
            value = self._fallback(screen_size)

        self.screen_size_cache = screen_size
        self.current_value = value
        logger.debug("Resolved %s -> %r", screen_size.value, value)
        return value

    def get_layout_size_value(
        self,
        constraints: BoxConstraints,
        use_shortest_side: bool = False,
    ) -> T:
        """Resolve from a local box: its width, or its shortest side."""
        dimension = constraints.dimension(use_shortest_side)
        return self.get_screen_size_value(self.get_screen_size(dimension))

    def reset(self) -> None:
        """Forget the cached category and value."""
        self.screen_size_cache = None
        self.current_value = None

    def _fallback(self, screen_size: K) -> T:
        order = list(self.values)
        index = order.index(screen_size)

        for candidate in order[index:]:
            value = self.values[candidate]
            if value is not None:
                logger.debug("No value for %s, using smaller %s", screen_size.value, candidate.value)
                return value

        # Nothing at or below the requested size, take the last populated one
        populated = [(size, v) for size, v in self.values.items() if v is not None]
        if not populated:
            raise UnresolvableValueError(
                f"No value configured for any {self.breakpoints.size_enum.__name__} category"
            )
        size, value = populated[-1]
        logger.debug("No value for %s or smaller, using larger %s", screen_size.value, size.value)
        return value

    def __eq__(self, other: object) -> bool:
        # Cache state is not part of a handler's identity
        if not isinstance(other, BreakpointsHandler):
            return NotImplemented
        return (
            self.breakpoints == other.breakpoints
            and self.values == other.values
            and self.on_changed == other.on_changed
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        set_sizes = [size.value for size, v in self.values.items() if v is not None]
        return (
            f"{type(self).__name__}(breakpoints={self.breakpoints!r}, "
            f"values={set_sizes}, cached={self.screen_size_cache})"
        )
