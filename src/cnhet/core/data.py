"""Data structures for segmented copy number profiles."""

from dataclasses import dataclass, field
from typing import Any, Dict
import numpy as np

from cnhet.core.validation import validate_segments


@dataclass(frozen=True, eq=False)
class SegmentProfile:
    """
    Segmented relative copy number profile of one sample.

    Packages segment values separate from the search. The profile is
    read-only once constructed: fields cannot be reassigned and both arrays
    are flagged non-writeable, so the same profile can be scored from
    several threads. Profiles compare by identity.

    Attributes:
        values: Relative copy number per segment, shape (N,)
        lengths: Segment lengths (e.g. bases covered), shape (N,)
        metadata: Sample-specific metadata (sample name, assay, etc.)
    """

    values: np.ndarray
    lengths: np.ndarray
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate shapes and domains, then freeze the arrays."""
        values, lengths = validate_segments(self.values, self.lengths)
        values.flags.writeable = False
        lengths.flags.writeable = False
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "lengths", lengths)

    @classmethod
    def from_arrays(cls, seg_val, seg_len, **metadata) -> "SegmentProfile":
        """
        Create from segment value and length sequences.

        Args:
            seg_val: Relative copy numbers
            seg_len: Segment lengths
            **metadata: Additional metadata as keyword args

        Returns:
            SegmentProfile instance
        """
        return cls(values=seg_val, lengths=seg_len, metadata=metadata)

    @property
    def n_segments(self) -> int:
        return int(self.values.size)

    @property
    def total_length(self) -> float:
        return float(self.lengths.sum())

    def __len__(self) -> int:
        return self.n_segments

    def __repr__(self) -> str:
        return (
            f"SegmentProfile(segments={self.n_segments}, "
            f"total_length={self.total_length:g})"
        )
