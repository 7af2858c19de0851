"""
Features are annotations on sequence positions, arranged into trees and ordered for layout.
"""

from inscripta.biofeature.feature.feature import FeatureNode  # noqa: F401
from inscripta.biofeature.feature.ordering import (  # noqa: F401
    FeatureOrdering,
    compare_location_longest_first,
    compare_length,
    compare_type,
    chain_comparators,
    sort_features,
)
