"""Size category enumerations.

Members are declared from the largest category to the smallest. That
order drives both the descending-threshold check and the fallback search.
"""

from enum import Enum
from typing import TypeVar

from responsive_size.core.errors import BreakpointConfigError


class LayoutSize(Enum):
    """Standard five-category scale."""
    EXTRA_LARGE = "extraLarge"   # wide desktop monitors
    LARGE = "large"              # desktops and laptops
    MEDIUM = "medium"            # tablets, small laptops
    SMALL = "small"              # phones, portrait tablets
    EXTRA_SMALL = "extraSmall"   # catch-all


class LayoutSizeGranular(Enum):
    """Granular thirteen-category scale in four groups."""
    JUMBO_EXTRA_LARGE = "jumboExtraLarge"
    JUMBO_LARGE = "jumboLarge"
    JUMBO_NORMAL = "jumboNormal"
    JUMBO_SMALL = "jumboSmall"
    STANDARD_EXTRA_LARGE = "standardExtraLarge"
    STANDARD_LARGE = "standardLarge"
    STANDARD_NORMAL = "standardNormal"
    STANDARD_SMALL = "standardSmall"
    COMPACT_EXTRA_LARGE = "compactExtraLarge"
    COMPACT_LARGE = "compactLarge"
    COMPACT_NORMAL = "compactNormal"
    COMPACT_SMALL = "compactSmall"
    TINY = "tiny"  # catch-all


K = TypeVar("K", bound=Enum)


def parse_size(enum_cls: type[K], name: "str | K") -> K:
    """
    Look up a category by value or member name.

    Accepts ``"extraLarge"``, ``"EXTRA_LARGE"``, ``"extra-large"`` and
    the member itself.
    """
    if isinstance(name, enum_cls):
        return name
    if not isinstance(name, str):
        raise BreakpointConfigError(
            f"{enum_cls.__name__} category must be a string, got {name!r}"
        )

    for member in enum_cls:
        if member.value == name:
            return member

    key = name.strip().replace("-", "_").upper()
    try:
        return enum_cls[key]
    except KeyError:
        valid = ", ".join(m.value for m in enum_cls)
        raise BreakpointConfigError(
            f"Unknown {enum_cls.__name__} category {name!r} (expected one of: {valid})"
        ) from None
