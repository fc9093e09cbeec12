"""
Simulation of segmented relative copy number profiles.

Generates profiles with known ploidy, purity and integer absolute copy
number states. Used for validation and recovery tests.
"""

from dataclasses import dataclass
from typing import Optional, Sequence
import numpy as np

from cnhet.core.data import SegmentProfile
from cnhet.core.errors import DomainError
from cnhet.core.transform import NORMAL_COPY_NUMBER


@dataclass
class ProfileSimulationConfig:
    """
    Configuration for random profile simulation.

    Attributes:
        n_segments: Number of segments
        max_state: Largest absolute copy number state drawn
        min_length: Smallest segment length
        max_length: Largest segment length
        noise_sd: Gaussian noise on relative values
        seed: Random seed for reproducibility
    """
    n_segments: int = 50
    max_state: int = 6
    min_length: float = 1e5
    max_length: float = 5e7
    noise_sd: float = 0.0
    seed: int = 42


def relative_copy_number(
    states: Sequence[float],
    ploidy: float,
    purity: float,
) -> np.ndarray:
    """
    Relative copy number of absolute states in a tumor/normal mixture.

    Inverse of the absolute copy number transform: the sample signal is the
    purity-weighted mix of tumor states and normal diploid cells, relative
    to the sample's average copy number.

    Example:
        >>> relative_copy_number([2, 6], ploidy=2, purity=1)
        array([1., 3.])
    """
    if ploidy <= 0:
        raise DomainError(f"Ploidy must be positive, got {ploidy}")
    if not 0 < purity <= 1:
        raise DomainError(f"Purity must be in (0, 1], got {purity}")
    states = np.asarray(states, dtype=float)
    normal = NORMAL_COPY_NUMBER * (1 - purity)
    return (purity * states + normal) / (purity * ploidy + normal)


def simulate_profile(
    states: Sequence[float],
    lengths: Sequence[float],
    ploidy: float,
    purity: float,
    noise_sd: float = 0.0,
    rng: Optional[np.random.Generator] = None,
) -> SegmentProfile:
    """
    Simulate a segmented relative copy number profile.

    Args:
        states: Absolute copy number state per segment
        lengths: Segment lengths
        ploidy: True tumor ploidy
        purity: True tumor purity
        noise_sd: Standard deviation of Gaussian noise added to each
                  relative segment value (default: noiseless)
        rng: Random number generator (default: create new one)

    Returns:
        SegmentProfile with the true parameters in metadata
    """
    values = relative_copy_number(states, ploidy, purity)
    if noise_sd > 0:
        if rng is None:
            rng = np.random.default_rng()
        values = values + rng.normal(0.0, noise_sd, size=values.shape)

    return SegmentProfile.from_arrays(
        values,
        lengths,
        ploidy=ploidy,
        purity=purity,
        states=np.asarray(states),
        noise_sd=noise_sd,
    )


def simulate_random_profile(
    ploidy: float,
    purity: float,
    config: Optional[ProfileSimulationConfig] = None,
) -> SegmentProfile:
    """
    Simulate a profile with random states and segment lengths.

    States are drawn uniformly from 1..max_state, lengths uniformly from
    [min_length, max_length).
    """
    if config is None:
        config = ProfileSimulationConfig()
    rng = np.random.default_rng(config.seed)

    states = rng.integers(1, config.max_state + 1, size=config.n_segments)
    lengths = rng.uniform(config.min_length, config.max_length, size=config.n_segments)
    return simulate_profile(
        states, lengths, ploidy, purity, noise_sd=config.noise_sd, rng=rng
    )
