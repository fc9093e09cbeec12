"""Inference entry points.

Separates the public interface from the search machinery:
- validation: defines which inputs are admissible
- ParameterGrid: defines which hypotheses are considered
- transform / objective: define how one hypothesis is scored
- GridSearchOptimizer: defines how the best hypothesis is found
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional
import numpy as np

from cnhet.core.config import SearchConfig
from cnhet.core.errors import DomainError
from cnhet.core.grid import ParameterGrid
from cnhet.core.optimizer import GridSearchOptimizer, SearchResult, first_minimum
from cnhet.core.transform import transform_coefficients
from cnhet.core.validation import (
    ParameterRange,
    validate_inputs,
    validate_values,
    validate_ploidy,
    validate_purity,
)

logger = logging.getLogger(__name__)


class CNHResult(NamedTuple):
    """Inferred copy number heterogeneity with its ploidy and purity."""

    cnh: float
    ploidy: float
    purity: float


@dataclass(eq=False)
class CNHSurface:
    """
    CNH evaluated over a whole (ploidy, purity) grid.

    Attributes:
        ploidy: Ploidy axis, shape (n_ploidy,)
        purity: Purity axis, shape (n_purity,)
        cnh: CNH per grid point, shape (n_ploidy, n_purity)
    """

    ploidy: np.ndarray
    purity: np.ndarray
    cnh: np.ndarray

    def best(self) -> CNHResult:
        """
        Minimum of the surface, first in (ploidy, purity) order among ties.

        Returns the sentinel (1, 0, 0) for an empty surface.
        """
        k, score = first_minimum(self.cnh.ravel())
        if k is None or not score < SearchResult.initial().cnh:
            initial = SearchResult.initial()
            return CNHResult(initial.cnh, initial.ploidy, initial.purity)
        i, j = np.unravel_index(k, self.cnh.shape)
        return CNHResult(score, float(self.ploidy[i]), float(self.purity[j]))

    def __repr__(self) -> str:
        return f"CNHSurface(shape={self.cnh.shape})"


def infer_cnh(
    seg_val,
    seg_len,
    ploidy: ParameterRange = None,
    purity: ParameterRange = None,
    config: Optional[SearchConfig] = None,
) -> CNHResult:
    """
    Infer copy number heterogeneity, ploidy and purity from one profile.

    Relative segment copy numbers are transformed to absolute copy numbers
    for each (ploidy, purity) hypothesis, and the length-weighted mean
    distance of the segments to the nearest integer is minimized over the
    grid. A fixed ploidy or purity is searched as a one-element axis.

    Args:
        seg_val: Relative copy number per segment, length N
        seg_len: Segment lengths, length N
        ploidy: Known ploidy, candidate ploidies, or None to search
            the default range 1.5-5.0 in steps of 0.01
        purity: Known purity, candidate purities, or None to search
            the default range 0.2-1.0 in steps of 0.01
        config: Optional SearchConfig (default ranges, threading)

    Returns:
        CNHResult(cnh, ploidy, purity); purity == 0 means no solution

    Raises:
        ShapeError: seg_val and seg_len are not equal-length 1-D sequences
        DomainError: Invalid ploidy, purity or segment values

    Example:
        >>> infer_cnh([1.0, 3.0], [100, 100], ploidy=2, purity=1)
        CNHResult(cnh=0.0, ploidy=2.0, purity=1.0)
    """
    profile, ploidy_axis, purity_axis = validate_inputs(seg_val, seg_len, ploidy, purity)
    if config is None:
        config = SearchConfig()

    grid = ParameterGrid.build(ploidy_axis, purity_axis, config=config)
    result = GridSearchOptimizer(config).search(profile, grid)

    if result.found:
        logger.info(
            f"CNH={result.cnh:.4f} at ploidy={result.ploidy:g}, "
            f"purity={result.purity:g} ({len(grid)} grid points)"
        )
    else:
        logger.warning(f"No solution found on {grid!r}")
    return CNHResult(result.cnh, result.ploidy, result.purity)


def cnh_surface(
    seg_val,
    seg_len,
    ploidy: ParameterRange = None,
    purity: ParameterRange = None,
    config: Optional[SearchConfig] = None,
) -> CNHSurface:
    """
    Evaluate CNH at every point of the (ploidy, purity) grid.

    Takes the same arguments as infer_cnh. Useful for inspecting competing
    optima; surface.best() equals infer_cnh on the same inputs.

    Returns:
        CNHSurface with a (n_ploidy, n_purity) CNH matrix
    """
    profile, ploidy_axis, purity_axis = validate_inputs(seg_val, seg_len, ploidy, purity)
    if config is None:
        config = SearchConfig()

    grid = ParameterGrid.build(ploidy_axis, purity_axis, config=config)
    scores = GridSearchOptimizer(config).evaluate(profile, grid)
    return CNHSurface(ploidy=grid.ploidy, purity=grid.purity, cnh=scores)


def _fixed(value: float, candidates: Optional[np.ndarray], name: str) -> float:
    if candidates is None or candidates.size != 1:
        raise DomainError(f"{name} must be a single known value, got {value!r}")
    return float(candidates[0])


def absolute_copy_number(seg_val, ploidy: float, purity: float) -> np.ndarray:
    """
    Absolute copy number of each segment under a known ploidy and purity.

    Args:
        seg_val: Relative copy number per segment
        ploidy: Tumor ploidy (scalar)
        purity: Tumor purity (scalar)

    Returns:
        Absolute copy numbers q = a1 * seg_val + a2

    Example:
        >>> absolute_copy_number([1.0, 3.0], ploidy=2, purity=1)
        array([2., 6.])
    """
    values = validate_values(seg_val)
    p = _fixed(ploidy, validate_ploidy(ploidy), "ploidy")
    u = _fixed(purity, validate_purity(purity), "purity")
    return transform_coefficients(p, u).apply(values)


def integer_copy_number(seg_val, ploidy: float, purity: float) -> np.ndarray:
    """
    Nearest non-negative integer copy number of each segment.

    Returns:
        Integer array of the same length as seg_val
    """
    q = absolute_copy_number(seg_val, ploidy, purity)
    return np.clip(np.rint(q), 0, None).astype(int)
