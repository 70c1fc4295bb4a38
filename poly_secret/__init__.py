"""Poly Secret — Recover a polynomial's constant term from base-N encoded shares."""

from .encoding import decode, encode, parse_base
from .points import Point, PointCollection, build, parse_document, load_document
from .lagrange import interpolate_at_zero, Interpolation
from .recovery import reconstruct, recover_file, ReconstructionResult, Verification
from .errors import (
    ReconstructionError, InvalidBase, InvalidDigitCharacter, DigitOutOfRange,
    DuplicateAbscissa, InsufficientPoints, InexactInterpolation,
    InvalidThreshold, MalformedShare,
)

__all__ = [
    'decode', 'encode', 'parse_base',
    'Point', 'PointCollection', 'build', 'parse_document', 'load_document',
    'interpolate_at_zero', 'Interpolation',
    'reconstruct', 'recover_file', 'ReconstructionResult', 'Verification',
    'ReconstructionError', 'InvalidBase', 'InvalidDigitCharacter', 'DigitOutOfRange',
    'DuplicateAbscissa', 'InsufficientPoints', 'InexactInterpolation',
    'InvalidThreshold', 'MalformedShare',
]
