"""
CNHET: Copy Number Heterogeneity, ploidy and purity from a single profile

Transforms a segmented relative copy number profile to absolute copy
numbers over a grid of (ploidy, purity) hypotheses and reports the one
under which segments sit closest to integer copy number states.
"""

__version__ = "0.1.0"

from cnhet.core.config import SearchConfig
from cnhet.core.errors import CNHError, ShapeError, DomainError
from cnhet.core.data import SegmentProfile
from cnhet.core.inference import (
    CNHResult,
    CNHSurface,
    infer_cnh,
    cnh_surface,
    absolute_copy_number,
    integer_copy_number,
)

__all__ = [
    "SearchConfig",
    "CNHError",
    "ShapeError",
    "DomainError",
    "SegmentProfile",
    "CNHResult",
    "CNHSurface",
    "infer_cnh",
    "cnh_surface",
    "absolute_copy_number",
    "integer_copy_number",
    "__version__",
]
