"""
Input validation for CNH inference.

Every check raises before any search work begins; nothing here has side
effects beyond raising. Absent ploidy or purity (``None`` or an empty
sequence) is valid and means "search this dimension".
"""

from numbers import Real
from typing import Optional, Sequence, Tuple, Union, TYPE_CHECKING
import numpy as np

from cnhet.core.errors import DomainError, ShapeError

if TYPE_CHECKING:
    from cnhet.core.data import SegmentProfile

ParameterRange = Union[float, Sequence[float], np.ndarray, None]


def _is_numeric(arr: np.ndarray) -> bool:
    # Strings, bools and objects are rejected before float conversion
    return arr.size == 0 or arr.dtype.kind in "iuf"


def _as_vector(x, name: str) -> np.ndarray:
    """Copy to a 1-D float array, accepting (N, 1) column arrays."""
    try:
        raw = np.asarray(x)
    except (TypeError, ValueError) as e:
        raise ShapeError(
            f"{name} must be a one-dimensional sequence of reals ({e})"
        ) from e
    if not _is_numeric(raw):
        raise DomainError(f"{name} must contain real numbers, got {raw.dtype} values")
    arr = np.array(raw, dtype=float)

    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    if arr.ndim != 1:
        raise ShapeError(
            f"{name} must be a one-dimensional column sequence, "
            f"got array of shape {arr.shape}"
        )
    return arr


def validate_values(seg_val) -> np.ndarray:
    """
    Check relative segment copy numbers on their own.

    Raises:
        ShapeError: Not a non-empty 1-D sequence
        DomainError: Non-finite values
    """
    values = _as_vector(seg_val, "seg_val")
    if values.size == 0:
        raise ShapeError("At least one segment is required")
    if not np.all(np.isfinite(values)):
        raise DomainError("seg_val contains non-finite values")
    return values


def validate_segments(seg_val, seg_len) -> Tuple[np.ndarray, np.ndarray]:
    """
    Check segment values and lengths.

    Args:
        seg_val: Relative copy number per segment, length N
        seg_len: Segment lengths, length N

    Returns:
        (values, lengths) as 1-D float arrays

    Raises:
        ShapeError: Not equal-length 1-D sequences, or empty
        DomainError: Non-finite values, negative lengths, or zero total length
    """
    values = _as_vector(seg_val, "seg_val")
    lengths = _as_vector(seg_len, "seg_len")

    if values.size != lengths.size:
        raise ShapeError(
            f"seg_val and seg_len must have equal length, "
            f"got {values.size} and {lengths.size}"
        )
    values = validate_values(values)

    if not np.all(np.isfinite(lengths)):
        raise DomainError("seg_len contains non-finite values")
    if np.any(lengths < 0):
        raise DomainError("seg_len must be non-negative")
    if lengths.sum() <= 0:
        raise DomainError("Total segment length must be positive")

    return values, lengths


def _as_candidates(x: ParameterRange, name: str) -> Optional[np.ndarray]:
    if x is None:
        return None
    if isinstance(x, bool):
        raise DomainError(f"{name} must be a real number, got {x!r}")
    if isinstance(x, Real):
        return np.array([float(x)])

    try:
        raw = np.asarray(x)
    except (TypeError, ValueError) as e:
        raise DomainError(f"{name} must be a real scalar or sequence ({e})") from e
    if not _is_numeric(raw):
        raise DomainError(f"{name} must be a real number, got {x!r}")
    arr = raw.astype(float)

    if arr.ndim == 0:
        return arr.reshape(1)
    if arr.ndim != 1:
        raise DomainError(
            f"{name} must be a scalar or a 1-D sequence, got shape {arr.shape}"
        )
    if arr.size == 0:
        return None
    return arr


def validate_ploidy(ploidy: ParameterRange) -> Optional[np.ndarray]:
    """
    Validate ploidy.

    Returns:
        Candidate ploidies as a 1-D array, or None when ploidy is absent
    """
    candidates = _as_candidates(ploidy, "ploidy")
    if candidates is None:
        return None
    if not np.all(np.isfinite(candidates) & (candidates > 0)):
        raise DomainError(f"Ploidy must be a positive scalar or empty, got {ploidy!r}")
    return candidates


def validate_purity(purity: ParameterRange) -> Optional[np.ndarray]:
    """
    Validate purity.

    Returns:
        Candidate purities as a 1-D array, or None when purity is absent
    """
    candidates = _as_candidates(purity, "purity")
    if candidates is None:
        return None
    if not np.all(np.isfinite(candidates) & (candidates > 0) & (candidates <= 1)):
        raise DomainError(f"Purity must be in (0, 1] or empty, got {purity!r}")
    return candidates


def validate_inputs(
    seg_val,
    seg_len,
    ploidy: ParameterRange = None,
    purity: ParameterRange = None,
) -> Tuple["SegmentProfile", Optional[np.ndarray], Optional[np.ndarray]]:
    """
    Validate all inference inputs.

    Returns:
        (profile, ploidy candidates or None, purity candidates or None)
    """
    from cnhet.core.data import SegmentProfile

    profile = SegmentProfile(seg_val, seg_len)
    return profile, validate_ploidy(ploidy), validate_purity(purity)
