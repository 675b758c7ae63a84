"""
Typed errors raised by the experiment statistics engine.

All errors derive from DomainError (a ValueError) so callers can catch
every engine failure with a single except clause.
"""


class DomainError(ValueError):
    """Base class for engine errors."""


class InvalidParameterError(DomainError):
    """A numeric input is outside its documented range."""


class DegenerateInputError(DomainError):
    """Observation data cannot support the computation (e.g. empty arm)."""


class ArithmeticDomainError(DomainError):
    """A computation would otherwise produce NaN or Infinity."""
