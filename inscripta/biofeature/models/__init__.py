"""
Data models. These models allow for validation of inputs to a BioFeature model.
"""

from inscripta.biofeature.models.models import (  # noqa: F401
    QualifierModel,
    FeatureLocationModel,
    FeatureNodeModel,
)
