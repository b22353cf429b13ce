"""Error types raised by woescore.

All of them derive from ``ValueError`` so callers that already guard
numerical code with ``except ValueError`` keep working.
"""


class WoeScoreError(ValueError):
    """Base class for woescore input and numerical errors."""


class InputShapeError(WoeScoreError):
    """Predictor and target are misaligned, or the target is not binary 0/1."""


class DegenerateInputError(WoeScoreError):
    """Input carries no usable information (all missing, one target class, too few bins)."""


class NumericDomainError(WoeScoreError):
    """A WOE share is still zero after smoothing."""


__all__ = [
    "WoeScoreError",
    "InputShapeError",
    "DegenerateInputError",
    "NumericDomainError",
]
