"""
Relative-to-absolute copy number transform.

Absolute copy number is the relative copy number rescaled by tumor cell
fraction and ploidy, corrected for the signal of normal cells, which are
assumed to carry two copies:

    q = a1 * v + a2
    a1 = (purity * ploidy + 2 * (1 - purity)) / purity
    a2 = -2 * (1 - purity) / purity
"""

from typing import NamedTuple, Tuple
import numpy as np

from cnhet.core.errors import DomainError
from cnhet.core.grid import ParameterGrid

NORMAL_COPY_NUMBER = 2.0


class TransformCoefficients(NamedTuple):
    """Affine coefficients mapping relative to absolute copy number."""

    a1: float
    a2: float

    def apply(self, values: np.ndarray) -> np.ndarray:
        """Absolute copy numbers q = a1 * v + a2."""
        return self.a1 * np.asarray(values, dtype=float) + self.a2


def transform_coefficients(ploidy: float, purity: float) -> TransformCoefficients:
    """
    Coefficients for one (ploidy, purity) hypothesis.

    Args:
        ploidy: Tumor ploidy
        purity: Tumor cell fraction, must be non-zero

    Returns:
        TransformCoefficients(a1, a2)

    Example:
        >>> transform_coefficients(2.0, 1.0)
        TransformCoefficients(a1=2.0, a2=0.0)
    """
    if purity == 0:
        raise DomainError("Transform is undefined for purity == 0")
    normal = NORMAL_COPY_NUMBER * (1 - purity)
    a1 = (purity * ploidy + normal) / purity
    a2 = -normal / purity
    return TransformCoefficients(float(a1), float(a2))


def coefficient_arrays(grid: ParameterGrid) -> Tuple[np.ndarray, np.ndarray]:
    """
    Coefficients for every grid point, in enumeration order.

    Same arithmetic as transform_coefficients, vectorized.

    Returns:
        (a1, a2), each of shape (len(grid),)
    """
    ploidy, purity = grid.flat_parameters()
    if np.any(purity == 0):
        raise DomainError("Transform is undefined for purity == 0")
    normal = NORMAL_COPY_NUMBER * (1 - purity)
    a1 = (purity * ploidy + normal) / purity
    a2 = -normal / purity
    return a1, a2
