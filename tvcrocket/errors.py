"""Exception types raised by the rocket model.

Configuration problems are reported once, when the rocket is set up.
Domain problems (a singular tangent, a meaningless mass distribution) are
reported as soon as the offending value reaches the math, so that a NaN
or an infinite value never makes it into the integrator.
"""


class TVCRocketError(Exception):
    """Base class for all errors raised by tvcrocket."""


class ConfigurationError(TVCRocketError, ValueError):
    """Invalid rocket geometry or mass.

    Attributes:
        field: Name of the offending configuration field
        value: Value that was rejected
        lower: Exclusive lower bound (None if unbounded)
        upper: Exclusive upper bound (None if unbounded)
    """

    def __init__(
        self,
        field: str,
        value: float,
        lower: float | None = None,
        upper: float | None = None,
        message: str | None = None,
    ) -> None:
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        if message is None:
            lo = "-inf" if lower is None else f"{lower:g}"
            hi = "inf" if upper is None else f"{upper:g}"
            message = f"{field}={value!r} must lie strictly within ({lo}, {hi})"
        super().__init__(message)


class DomainError(TVCRocketError, ValueError):
    """A value outside the domain where the model is defined.

    Attributes:
        quantity: Name of the offending quantity
        value: Value that was rejected
        reason: Short description of why it is invalid
    """

    def __init__(self, quantity: str, value: float, reason: str) -> None:
        self.quantity = quantity
        self.value = value
        self.reason = reason
        super().__init__(f"{quantity}={value!r}: {reason}")
