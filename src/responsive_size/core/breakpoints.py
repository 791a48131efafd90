"""Breakpoint tables - ordered thresholds for each size category."""

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, ClassVar, Generic, Mapping, TypeVar

from responsive_size.core.errors import BreakpointConfigError
from responsive_size.core.sizes import LayoutSize, LayoutSizeGranular, parse_size

K = TypeVar("K", bound=Enum)

# Threshold reported for the smallest category, which matches any dimension.
CATCH_ALL_THRESHOLD = -1.0


@dataclass(frozen=True)
class BaseBreakpoints(Generic[K]):
    """
    Immutable table of minimum dimensions, one per size category.

    Subclasses declare one float field per category of ``size_enum``
    except the last, in the same order as the enum. The last category
    is the catch-all and has no field.

    Thresholds are validated on construction: strictly descending and
    the smallest one >= 0. Tables are value types, so two tables with
    the same thresholds compare and hash equal.
    """

    size_enum: ClassVar[type[Enum]]

    def __post_init__(self) -> None:
        names = [f.name for f in fields(self)]
        members = list(self.size_enum)
        if len(names) != len(members) - 1:
            raise TypeError(
                f"{type(self).__name__} must declare {len(members) - 1} thresholds, "
                f"found {len(names)}"
            )

        for name in names:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise BreakpointConfigError(
                    f"{type(self).__name__}.{name} must be a number, got {value!r}"
                )
            object.__setattr__(self, name, float(value))

        for upper, lower in zip(names, names[1:]):
            if not getattr(self, upper) > getattr(self, lower):
                raise BreakpointConfigError(
                    f"Breakpoints must be in descending order: "
                    f"{upper}={getattr(self, upper)} is not greater than "
                    f"{lower}={getattr(self, lower)}"
                )

        smallest = names[-1]
        if getattr(self, smallest) < 0:
            raise BreakpointConfigError(
                f"Breakpoints must be >= 0: {smallest}={getattr(self, smallest)}"
            )

    @property
    def values(self) -> dict[K, float]:
        """Ordered category -> threshold map, largest first, catch-all last."""
        members = list(self.size_enum)
        table = {
            member: getattr(self, f.name)
            for member, f in zip(members, fields(self))
        }
        table[members[-1]] = CATCH_ALL_THRESHOLD
        return table  # type: ignore[return-value]

    @property
    def catch_all(self) -> K:
        """The smallest category."""
        return list(self.size_enum)[-1]  # type: ignore[return-value]

    def threshold_of(self, size: K) -> float:
        """Return the threshold for one category."""
        try:
            return self.values[size]
        except KeyError:
            raise BreakpointConfigError(
                f"{size!r} is not a {self.size_enum.__name__} category"
            ) from None

    def copy_with(self, **overrides: float | None):
        """
        Return a new table with some thresholds replaced.

        ``None`` keeps the current value. The result is validated like
        any freshly constructed table.
        """
        names = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - names)
        if unknown:
            raise BreakpointConfigError(
                f"Unknown {type(self).__name__} threshold(s): {', '.join(unknown)}"
            )
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, float]):
        """
        Build a table from ``{category: threshold}``.

        Keys may be enum members, values (``"extraLarge"``) or member
        names (``"EXTRA_LARGE"``). Missing categories keep their default.
        """
        members = list(cls.size_enum)
        field_for = {m: f.name for m, f in zip(members, fields(cls))}

        kwargs: dict[str, float] = {}
        for key, threshold in mapping.items():
            size = parse_size(cls.size_enum, key)
            if size not in field_for:
                raise BreakpointConfigError(
                    f"{size.value!r} is the catch-all category and has no threshold"
                )
            kwargs[field_for[size]] = threshold
        return cls(**kwargs)

    def to_dict(self) -> dict[str, float]:
        """Serialize explicit thresholds keyed by category value."""
        return {
            member.value: threshold
            for member, threshold in self.values.items()
            if member is not self.catch_all
        }


@dataclass(frozen=True)
class Breakpoints(BaseBreakpoints[LayoutSize]):
    """Thresholds for the standard five-category scale."""

    size_enum: ClassVar[type[Enum]] = LayoutSize

    extra_large: float = 1200.0
    large: float = 950.0
    medium: float = 600.0
    small: float = 200.0

    DEFAULT: ClassVar["Breakpoints"]


@dataclass(frozen=True)
class BreakpointsGranular(BaseBreakpoints[LayoutSizeGranular]):
    """Thresholds for the granular thirteen-category scale."""

    size_enum: ClassVar[type[Enum]] = LayoutSizeGranular

    jumbo_extra_large: float = 4096.0
    jumbo_large: float = 3840.0
    jumbo_normal: float = 2560.0
    jumbo_small: float = 1920.0
    standard_extra_large: float = 1280.0
    standard_large: float = 1024.0
    standard_normal: float = 768.0
    standard_small: float = 568.0
    compact_extra_large: float = 480.0
    compact_large: float = 430.0
    compact_normal: float = 360.0
    compact_small: float = 300.0

    DEFAULT: ClassVar["BreakpointsGranular"]


# Shared default tables
Breakpoints.DEFAULT = Breakpoints()
BreakpointsGranular.DEFAULT = BreakpointsGranular()
