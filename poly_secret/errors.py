"""
Error taxonomy for polynomial secret recovery.

Every error is a ValueError, so callers that only care about
"bad input" can keep catching ValueError.
"""


class ReconstructionError(ValueError):
    """Base class for all recovery failures."""


class InvalidBase(ReconstructionError):
    """Numeric base outside 2..36 (or not an integer at all)."""


class InvalidDigitCharacter(ReconstructionError):
    """Character outside the 0-9a-z alphabet."""


class DigitOutOfRange(ReconstructionError):
    """Digit value not representable in the stated base."""


class DuplicateAbscissa(ReconstructionError):
    """Two points in one interpolation share the same x."""


class InsufficientPoints(ReconstructionError):
    """Fewer usable points than the threshold requires."""


class InexactInterpolation(ReconstructionError):
    """Interpolated value at x = 0 is not an integer (inconsistent shares)."""


class InvalidThreshold(ReconstructionError):
    """Threshold k below 1."""


class MalformedShare(ReconstructionError):
    """Share document is missing a required field."""
