"""Error taxonomy for copy-number heterogeneity inference.

All errors describe a caller-input problem and are raised before any
search work begins. They subclass ``ValueError`` so generic callers can
catch bad input without importing this module.
"""


class CNHError(ValueError):
    """Base class for invalid inference inputs."""


class ShapeError(CNHError):
    """Segment values and lengths are not equal-length 1-D sequences."""


class DomainError(CNHError):
    """A value lies outside its admissible domain (ploidy, purity, segments)."""
