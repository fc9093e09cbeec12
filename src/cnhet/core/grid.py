"""
Candidate (ploidy, purity) search space.

The grid is the Cartesian product of a ploidy axis and a purity axis.
Points are enumerated ploidy-outer, purity-inner; this order decides ties
in the optimizer and must not change.
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional, Tuple
import numpy as np

from cnhet.core.config import SearchConfig

# Decimal places kept on default axes, so that e.g. 1.5 + 150 * 0.01 == 3.0
_AXIS_DECIMALS = 12


def inclusive_range(start: float, stop: float, step: float) -> np.ndarray:
    """
    Evenly spaced candidates from start to stop, both ends included.

    Example:
        >>> inclusive_range(0.2, 1.0, 0.2)
        array([0.2, 0.4, 0.6, 0.8, 1. ])
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if stop < start:
        return np.empty(0)
    n = int(np.floor((stop - start) / step + 1e-9)) + 1
    return np.round(start + step * np.arange(n), _AXIS_DECIMALS)


class GridPoint(NamedTuple):
    """One (ploidy, purity) hypothesis and its enumeration index."""

    index: int
    ploidy: float
    purity: float


@dataclass(frozen=True, eq=False)
class ParameterGrid:
    """
    Cartesian product of ploidy and purity candidates.

    Attributes:
        ploidy: Ploidy axis, shape (n_ploidy,)
        purity: Purity axis, shape (n_purity,)
    """

    ploidy: np.ndarray
    purity: np.ndarray

    @classmethod
    def build(
        cls,
        ploidy: Optional[np.ndarray] = None,
        purity: Optional[np.ndarray] = None,
        config: Optional[SearchConfig] = None,
    ) -> "ParameterGrid":
        """
        Build the search grid, substituting defaults for absent axes.

        Args:
            ploidy: Validated ploidy candidates, or None to search defaults
            purity: Validated purity candidates, or None to search defaults
            config: Source of default ranges (default: SearchConfig())

        Returns:
            ParameterGrid
        """
        if config is None:
            config = SearchConfig()
        if ploidy is None:
            ploidy = inclusive_range(
                config.ploidy_start, config.ploidy_stop, config.ploidy_step
            )
        if purity is None:
            purity = inclusive_range(
                config.purity_start, config.purity_stop, config.purity_step
            )
        return cls(
            ploidy=np.atleast_1d(np.asarray(ploidy, dtype=float)),
            purity=np.atleast_1d(np.asarray(purity, dtype=float)),
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.ploidy.size, self.purity.size)

    def __len__(self) -> int:
        return self.ploidy.size * self.purity.size

    def iter_points(self) -> Iterator[GridPoint]:
        """Yield grid points, ploidy as outer axis, purity as inner axis."""
        index = 0
        for p in self.ploidy:
            for u in self.purity:
                yield GridPoint(index, float(p), float(u))
                index += 1

    def flat_parameters(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Flattened (ploidy, purity) arrays in enumeration order.

        Element k of both arrays is the k-th point of iter_points().
        """
        n_purity = self.purity.size
        return (
            np.repeat(self.ploidy, n_purity),
            np.tile(self.purity, self.ploidy.size),
        )

    def __repr__(self) -> str:
        return f"ParameterGrid(n_ploidy={self.shape[0]}, n_purity={self.shape[1]})"
