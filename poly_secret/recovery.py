"""
Secret reconstruction — Core logic.

Pick k shares, interpolate the polynomial at x = 0, and cross-check.

A reconstruction is:
1. The first k points (ascending x) interpolated at 0 give the secret
2. If more than k points exist, the last k points interpolated again
3. The two values compared; a mismatch is reported, never fatal

The primary secret is always the answer. The alternate subset
overlaps the primary one when fewer than 2k points are available,
so agreement there is weaker evidence.
"""

import json
import logging
from typing import Optional

from . import lagrange
from . import points as point_set
from .errors import InexactInterpolation, InsufficientPoints, InvalidThreshold


logger = logging.getLogger(__name__)


class Verification:
    """Outcome of interpolating the alternate subset."""

    def __init__(self, alternate_secret: int, matched: bool, points_used: list):
        self.alternate_secret = alternate_secret
        self.matched = matched
        self.points_used = points_used

    def to_dict(self) -> dict:
        return {
            'alternate_secret': None if self.alternate_secret is None else str(self.alternate_secret),
            'matched': self.matched,
            'points_used': [str(p.x) for p in self.points_used],
        }


class ReconstructionResult:
    """Represents the outcome of a single reconstruction run."""

    def __init__(self, secret: int, contributions: tuple, points_used: list,
                 k: int, verification: Optional[Verification] = None):
        self.secret = secret
        self.contributions = contributions
        self.points_used = points_used
        self.k = k
        self.verification = verification

    def to_dict(self) -> dict:
        # Big integers go out as decimal strings; JSON readers lose precision otherwise
        return {
            'version': 'poly_secret_v1',
            'secret': str(self.secret),
            'k': self.k,
            'points_used': [str(p.x) for p in self.points_used],
            'per_term_contributions': [str(c) for c in self.contributions],
            'verification': self.verification.to_dict() if self.verification else None,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def reconstruct(collection, k: int = None, truncate: bool = False) -> ReconstructionResult:
    """
    Reconstruct the secret from a point collection.

    Args:
        collection: PointCollection (points sorted by ascending x)
        k: Threshold; defaults to the collection's declared k
        truncate: Use truncating per-term division (see lagrange)

    Returns:
        ReconstructionResult with the primary secret and, when more than
        k points were available, the alternate-subset verification

    Raises:
        InvalidThreshold: k < 1
        InsufficientPoints: fewer than k points
        DuplicateAbscissa, InexactInterpolation: from interpolation
    """
    if k is None:
        k = collection.k
    if k < 1:
        raise InvalidThreshold(f"Threshold k must be >= 1, got {k}")
    if len(collection) < k:
        raise InsufficientPoints(
            f"Insufficient points! Need {k} but only have {len(collection)}"
        )

    primary = collection.first(k)
    secret, contributions = lagrange.interpolate_at_zero(primary, truncate=truncate)

    verification = None
    if len(collection) > k:
        alternate = collection.last(k)
        try:
            alternate_secret, _ = lagrange.interpolate_at_zero(alternate, truncate=truncate)
        except InexactInterpolation as e:
            # Inconsistent alternate subset is a failed check, not a failed recovery
            logger.warning("Alternate point set is inconsistent: %s", e)
            alternate_secret = None
        matched = alternate_secret == secret
        if not matched and alternate_secret is not None:
            logger.warning("Different point set gave different secret: %d (primary %d)",
                           alternate_secret, secret)
        verification = Verification(alternate_secret, matched, alternate)

    return ReconstructionResult(secret, contributions, primary, k, verification)


def recover_file(path: str, k: int = None, truncate: bool = False) -> tuple:
    """
    Load a share document from disk and reconstruct its secret.

    Returns:
        (PointCollection, ReconstructionResult)
    """
    document = point_set.load_document(path)
    collection = point_set.parse_document(document)
    return collection, reconstruct(collection, k=k, truncate=truncate)
