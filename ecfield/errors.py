"""
Error types raised by the elliptic-curve core and its collaborators.

Every error is a ValueError so callers that already guard arithmetic with
``except ValueError`` keep working.
"""


class CurveError(ValueError):
    """Base class for every failure reported by ecfield."""


class MalformedInputError(CurveError):
    """A boundary value is missing, non-numeric or has the wrong shape."""


class InvalidModulusError(CurveError):
    """The modulus cannot describe a field (p < 2)."""


class InvalidBitLengthError(CurveError):
    """Requested prime size is outside the accepted range."""


class ConfigError(CurveError):
    """A configuration value could not be parsed."""


class NonInvertibleError(CurveError, ArithmeticError):
    """
    Modular inverse does not exist.

    Happens when the denominator shares a factor with the modulus, i.e. the
    modulus is not prime or the denominator is a multiple of it.
    """

    def __init__(self, value: int, modulus: int):
        self.value = value
        self.modulus = modulus
        super().__init__(f"{value} has no inverse mod {modulus}")
