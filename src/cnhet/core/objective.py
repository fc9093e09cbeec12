"""
Copy number heterogeneity objective.

For a (ploidy, purity) hypothesis, CNH is the length-weighted mean
distance of the absolute segment copy numbers to their nearest integer:

    d_i = min(q_i mod 1, 1 - (q_i mod 1))
    CNH = sum(d_i * length_i) / sum(length_i)

0 means every segment sits on an integer copy number under that
hypothesis; the maximum is 0.5.
"""

import numpy as np

from cnhet.core.data import SegmentProfile
from cnhet.core.transform import TransformCoefficients


def distance_to_integer(q: np.ndarray) -> np.ndarray:
    """
    Distance of each value to its nearest integer, in [0, 0.5].

    Uses floor-based modulo, so the fractional part of a negative value is
    still in [0, 1).
    """
    frac = np.mod(q, 1.0)
    return np.minimum(frac, 1.0 - frac)


def score_grid(a1: np.ndarray, a2: np.ndarray, profile: SegmentProfile) -> np.ndarray:
    """
    CNH for a batch of hypotheses.

    Args:
        a1: Slope per hypothesis, shape (M,)
        a2: Intercept per hypothesis, shape (M,)
        profile: Segment profile with N segments

    Returns:
        CNH per hypothesis, shape (M,)
    """
    a1 = np.asarray(a1, dtype=float)
    a2 = np.asarray(a2, dtype=float)
    # (M, N): one row of absolute copy numbers per hypothesis
    q = a1[:, None] * profile.values[None, :] + a2[:, None]
    weighted = distance_to_integer(q) * profile.lengths[None, :]
    return weighted.sum(axis=1) / profile.lengths.sum()


def cnh_score(coefficients: TransformCoefficients, profile: SegmentProfile) -> float:
    """CNH of a single hypothesis."""
    scores = score_grid(
        np.array([coefficients.a1]), np.array([coefficients.a2]), profile
    )
    return float(scores[0])
