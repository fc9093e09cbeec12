"""Search configuration."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Configuration for the ploidy/purity grid search."""

    ploidy_start: float = 1.5
    """First default ploidy candidate."""

    ploidy_stop: float = 5.0
    """Last default ploidy candidate (inclusive)."""

    ploidy_step: float = 0.01
    """Spacing of default ploidy candidates."""

    purity_start: float = 0.2
    """First default purity candidate."""

    purity_stop: float = 1.0
    """Last default purity candidate (inclusive)."""

    purity_step: float = 0.01
    """Spacing of default purity candidates."""

    chunk_size: int = 512
    """Grid points scored per vectorized block. Block memory scales with
    chunk_size x number of segments."""

    max_block_elements: int = 2**22
    """Upper bound on grid points x segments held in one block."""

    n_jobs: int = 1
    """Worker threads used to score blocks. 1 = serial."""

    def __post_init__(self):
        if not 0 < self.ploidy_start <= self.ploidy_stop:
            raise ValueError(
                f"Default ploidy range must satisfy 0 < start <= stop, "
                f"got [{self.ploidy_start}, {self.ploidy_stop}]"
            )
        if not 0 < self.purity_start <= self.purity_stop <= 1:
            raise ValueError(
                f"Default purity range must lie in (0, 1], "
                f"got [{self.purity_start}, {self.purity_stop}]"
            )
        if self.ploidy_step <= 0 or self.purity_step <= 0:
            raise ValueError("Grid steps must be positive")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.max_block_elements < 1:
            raise ValueError(
                f"max_block_elements must be >= 1, got {self.max_block_elements}"
            )
        if self.n_jobs < 1:
            raise ValueError(f"n_jobs must be >= 1, got {self.n_jobs}")
