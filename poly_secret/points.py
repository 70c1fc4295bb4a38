"""
Share points — Build the (x, y) point set from a share document.

A share document looks like:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every key other than "keys" is a share identifier (the x coordinate).
Its value is decoded from the stated base to give y. Identifiers that
are not integers are skipped with a warning; everything else that is
wrong with a share is fatal.
"""

import json
import logging
from pathlib import Path
from typing import NamedTuple

from . import encoding
from .errors import DuplicateAbscissa, MalformedShare


logger = logging.getLogger(__name__)

META_KEY = 'keys'


class Point(NamedTuple):
    """One share: a sample of the polynomial at x."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class PointCollection:
    """Points sorted by ascending x, plus the declared n and k."""

    def __init__(self, points: list, n: int, k: int, skipped: list = None):
        self.points = tuple(sorted(points, key=lambda p: p.x))
        self.n = n
        self.k = k
        self.skipped = list(skipped or [])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, item):
        return self.points[item]

    @property
    def degree(self) -> int:
        """Polynomial degree implied by the threshold."""
        return self.k - 1

    def first(self, count: int) -> list:
        return list(self.points[:count])

    def last(self, count: int) -> list:
        if count <= 0:
            return []
        return list(self.points[-count:])

    def to_dict(self) -> dict:
        return {
            'n': self.n,
            'k': self.k,
            'points': [[str(p.x), str(p.y)] for p in self.points],
            'skipped': self.skipped,
        }


def parse_identifier(key) -> int:
    """
    Parse a share identifier into its x coordinate.

    Accepts an optional sign followed by ASCII digits, nothing else.
    Raises ValueError otherwise.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    if not isinstance(key, str) or not encoding.INTEGER_RE.fullmatch(key):
        raise ValueError(f"Invalid share identifier: {key!r}")
    return int(key)


def build(raw_entries: dict, declared_n: int, declared_k: int) -> PointCollection:
    """
    Build a sorted point collection from raw share entries.

    Args:
        raw_entries: Mapping identifier -> {"base": str, "value": str}
        declared_n: Number of shares the document claims to carry
        declared_k: Reconstruction threshold

    Returns:
        PointCollection with the decoded points and skipped identifiers

    Raises:
        MalformedShare: An entry is missing its base or value
        DuplicateAbscissa: Two identifiers name the same x (e.g. "3" and "03")
        InvalidBase, InvalidDigitCharacter, DigitOutOfRange: y fails to decode
    """
    points = []
    skipped = []
    seen = {}

    for key, entry in raw_entries.items():
        try:
            x = parse_identifier(key)
        except ValueError:
            logger.warning("Skipping invalid key %r", key)
            skipped.append(str(key))
            continue

        if x in seen:
            raise DuplicateAbscissa(
                f"Share identifiers {seen[x]!r} and {key!r} both give x = {x}"
            )
        seen[x] = key

        if not isinstance(entry, dict) or 'base' not in entry or 'value' not in entry:
            raise MalformedShare(f"Share {key!r} must have 'base' and 'value' fields")

        base = encoding.parse_base(entry['base'])
        y = encoding.decode(str(entry['value']), base)
        points.append(Point(x, y))

    return PointCollection(points, declared_n, declared_k, skipped)


def _require_int(meta: dict, name: str) -> int:
    if name not in meta:
        raise MalformedShare(f"Missing '{name}' in '{META_KEY}'")
    value = meta[name]
    if isinstance(value, bool):
        raise MalformedShare(f"'{name}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedShare(f"'{name}' must be an integer, got {value!r}") from None


def parse_document(document: dict) -> PointCollection:
    """Parse a whole share document (with its "keys" header) into points."""
    if not isinstance(document, dict):
        raise MalformedShare("Share document must be a JSON object")

    meta = document.get(META_KEY)
    if not isinstance(meta, dict):
        raise MalformedShare(f"Missing '{META_KEY}' object with n and k")

    n = _require_int(meta, 'n')
    k = _require_int(meta, 'k')

    entries = {key: value for key, value in document.items() if key != META_KEY}
    return build(entries, n, k)


def load_document(path: str) -> dict:
    """Load a share document from a JSON file."""
    return json.loads(Path(path).read_text())
