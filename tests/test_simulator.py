"""
Unit tests for cnhet.validation.simulator.
"""

import numpy as np
import pytest

from cnhet.core.errors import DomainError
from cnhet.validation.simulator import (
    ProfileSimulationConfig,
    relative_copy_number,
    simulate_profile,
    simulate_random_profile,
)


class TestRelativeCopyNumber:
    def test_pure_tumor(self):
        assert np.allclose(relative_copy_number([2, 6], ploidy=2, purity=1), [1.0, 3.0])

    def test_ploidy_state_is_one(self):
        """A segment at the tumor ploidy has relative copy number 1."""
        v = relative_copy_number([3.0], ploidy=3.0, purity=0.4)
        assert v[0] == pytest.approx(1.0)

    def test_invalid_parameters(self):
        with pytest.raises(DomainError):
            relative_copy_number([2], ploidy=0, purity=0.5)
        with pytest.raises(DomainError):
            relative_copy_number([2], ploidy=2, purity=1.2)


class TestSimulateProfile:
    def test_metadata(self):
        profile = simulate_profile([1, 2, 3], [10, 20, 30], ploidy=2.0, purity=0.8)
        assert profile.metadata["ploidy"] == 2.0
        assert profile.metadata["purity"] == 0.8
        assert list(profile.metadata["states"]) == [1, 2, 3]
        assert len(profile) == 3

    def test_noise_is_reproducible(self):
        a = simulate_profile([1, 2, 3], [1, 1, 1], 2.0, 0.8, noise_sd=0.1,
                             rng=np.random.default_rng(42))
        b = simulate_profile([1, 2, 3], [1, 1, 1], 2.0, 0.8, noise_sd=0.1,
                             rng=np.random.default_rng(42))
        clean = simulate_profile([1, 2, 3], [1, 1, 1], 2.0, 0.8)
        assert np.array_equal(a.values, b.values)
        assert not np.array_equal(a.values, clean.values)


class TestRandomProfile:
    def test_states_and_lengths(self):
        config = ProfileSimulationConfig(n_segments=100, max_state=4, seed=1)
        profile = simulate_random_profile(2.5, 0.6, config)
        states = profile.metadata["states"]
        assert len(profile) == 100
        assert states.min() >= 1
        assert states.max() <= 4
        assert np.all(profile.lengths >= config.min_length)
        assert np.all(profile.lengths <= config.max_length)

    def test_seeded(self):
        a = simulate_random_profile(2.5, 0.6)
        b = simulate_random_profile(2.5, 0.6)
        assert np.array_equal(a.values, b.values)
