"""Exceptions raised while configuring or resolving breakpoints."""


class BreakpointError(ValueError):
    """Base class for all breakpoint errors."""


class BreakpointConfigError(BreakpointError):
    """
    A breakpoint table, value map or config file is invalid.

    Raised eagerly at construction time. Thresholds are never clamped
    or reordered to make a bad configuration fit.
    """


class EmptyValuesError(BreakpointConfigError):
    """Every category of a value map is None."""


class UnresolvableValueError(BreakpointError):
    """A lookup found no value in any category.

    Construction-time validation makes this unreachable unless the value
    map was mutated after the handler was built.
    """
