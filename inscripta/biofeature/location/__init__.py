"""
Locations situate a feature on its sequence. Only the ``start`` and ``end`` positions of a location are used by
features; the location objects themselves are owned by the caller and are never copied or mutated.
"""

from inscripta.biofeature.location.strand import Strand  # noqa: F401
from inscripta.biofeature.location.location import FeatureLocation  # noqa: F401
