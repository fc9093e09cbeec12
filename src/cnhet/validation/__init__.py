"""Profile simulation for validation and recovery tests."""

from cnhet.validation.simulator import (
    ProfileSimulationConfig,
    relative_copy_number,
    simulate_profile,
    simulate_random_profile,
)

__all__ = [
    'ProfileSimulationConfig',
    'relative_copy_number',
    'simulate_profile',
    'simulate_random_profile',
]
