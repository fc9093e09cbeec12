"""Core components: validation, grid, transform, objective and search."""

from cnhet.core.config import SearchConfig
from cnhet.core.errors import CNHError, ShapeError, DomainError
from cnhet.core.data import SegmentProfile
from cnhet.core.validation import (
    validate_inputs,
    validate_segments,
    validate_values,
    validate_ploidy,
    validate_purity,
)
from cnhet.core.grid import GridPoint, ParameterGrid, inclusive_range
from cnhet.core.transform import (
    TransformCoefficients,
    transform_coefficients,
    coefficient_arrays,
)
from cnhet.core.objective import distance_to_integer, cnh_score, score_grid
from cnhet.core.optimizer import GridSearchOptimizer, SearchResult
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
    "validate_inputs",
    "validate_segments",
    "validate_values",
    "validate_ploidy",
    "validate_purity",
    "GridPoint",
    "ParameterGrid",
    "inclusive_range",
    "TransformCoefficients",
    "transform_coefficients",
    "coefficient_arrays",
    "distance_to_integer",
    "cnh_score",
    "score_grid",
    "GridSearchOptimizer",
    "SearchResult",
    "CNHResult",
    "CNHSurface",
    "infer_cnh",
    "cnh_surface",
    "absolute_copy_number",
    "integer_copy_number",
]
