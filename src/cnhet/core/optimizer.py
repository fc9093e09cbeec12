"""
Grid-search optimizer.

Scans every (ploidy, purity) point in enumeration order and keeps the
running minimum of the CNH objective. A point replaces the current best
only if it is strictly better, so among exact ties the first point in
enumeration order (ploidy outer, purity inner) wins.

Scoring is vectorized over blocks of grid points. Blocks are independent
and may be scored on a thread pool; they are always reduced in
enumeration order, so serial and threaded searches agree exactly.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
import numpy as np

from cnhet.core.config import SearchConfig
from cnhet.core.data import SegmentProfile
from cnhet.core.grid import ParameterGrid
from cnhet.core.objective import score_grid
from cnhet.core.transform import coefficient_arrays

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """
    Best (CNH, ploidy, purity) found by a grid search.

    The sentinel SearchResult.initial() (CNH = 1, ploidy = 0, purity = 0)
    means no grid point was evaluated. Valid purity is always > 0.
    """

    cnh: float
    ploidy: float
    purity: float

    @classmethod
    def initial(cls) -> "SearchResult":
        return cls(cnh=1.0, ploidy=0.0, purity=0.0)

    @property
    def found(self) -> bool:
        return self.purity > 0

    def __repr__(self) -> str:
        return (
            f"SearchResult(cnh={self.cnh:.6f}, "
            f"ploidy={self.ploidy:g}, purity={self.purity:g})"
        )


class GridSearchOptimizer:
    """
    Exhaustive grid search over (ploidy, purity).

    Pipeline per block of grid points:
        (ploidy, purity) → coefficient_arrays → (a1, a2)
                         → score_grid(profile) → CNH

    Attributes:
        config: SearchConfig (block size, worker threads)
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config if config is not None else SearchConfig()

    def _blocks(self, n_points: int, n_segments: int = 1) -> List[slice]:
        per_block = min(
            self.config.chunk_size,
            self.config.max_block_elements // max(n_segments, 1),
        )
        per_block = max(per_block, 1)
        return [
            slice(start, min(start + per_block, n_points))
            for start in range(0, n_points, per_block)
        ]

    def iter_scores(
        self,
        profile: SegmentProfile,
        grid: ParameterGrid,
    ) -> Iterator[Tuple[slice, np.ndarray]]:
        """
        Score the grid block by block, in enumeration order.

        Yields:
            (block, scores) where block is a slice of flat grid indices
        """
        n_points = len(grid)
        if n_points == 0:
            return

        a1, a2 = coefficient_arrays(grid)
        blocks = self._blocks(n_points, profile.n_segments)
        logger.debug(
            f"Scoring {n_points} grid points ({grid.shape[0]} ploidy x "
            f"{grid.shape[1]} purity) in {len(blocks)} blocks, "
            f"n_jobs={self.config.n_jobs}"
        )

        def score_block(block: slice) -> np.ndarray:
            return score_grid(a1[block], a2[block], profile)

        if self.config.n_jobs == 1 or len(blocks) == 1:
            for block in blocks:
                yield block, score_block(block)
            return

        with ThreadPoolExecutor(max_workers=self.config.n_jobs) as executor:
            # map() returns results in submission order
            for block, scores in zip(blocks, executor.map(score_block, blocks)):
                yield block, scores

    def evaluate(self, profile: SegmentProfile, grid: ParameterGrid) -> np.ndarray:
        """
        CNH at every grid point.

        Returns:
            Array of shape grid.shape (ploidy rows, purity columns)
        """
        scores = np.empty(len(grid))
        for block, block_scores in self.iter_scores(profile, grid):
            scores[block] = block_scores
        return scores.reshape(grid.shape)

    def search(self, profile: SegmentProfile, grid: ParameterGrid) -> SearchResult:
        """
        Find the grid point with minimal CNH.

        Args:
            profile: Validated segment profile
            grid: Candidate (ploidy, purity) grid

        Returns:
            SearchResult; the sentinel if the grid is empty
        """
        best = SearchResult.initial()
        ploidy_flat, purity_flat = grid.flat_parameters()

        for block, scores in self.iter_scores(profile, grid):
            k, score = first_minimum(scores)
            if k is None or not score < best.cnh:
                continue
            index = block.start + k
            best = SearchResult(
                cnh=score,
                ploidy=float(ploidy_flat[index]),
                purity=float(purity_flat[index]),
            )
            logger.debug(f"Improved at grid point {index}: {best}")

        return best


def first_minimum(scores: np.ndarray) -> Tuple[Optional[int], float]:
    """
    Position and value of the first minimum of a score vector.

    Equivalent to a left-to-right scan keeping strict improvements; NaN
    scores never win.

    Returns:
        (position, score), or (None, inf) if every score is NaN
    """
    if scores.size == 0:
        return None, np.inf
    cleaned = np.where(np.isnan(scores), np.inf, scores)
    k = int(np.argmin(cleaned))
    if np.isnan(scores[k]):
        return None, np.inf
    return k, float(cleaned[k])
