"""
Qualifiers annotate features with name/value pairs. The :class:`QualifierIndex` stores them in insertion order and
exposes database cross references through the :class:`DatabaseReference` aggregate.
"""

from inscripta.biofeature.qualifiers.constants import QualifierKind, ReservedQualifiers  # noqa: F401
from inscripta.biofeature.qualifiers.qualifier import (  # noqa: F401
    Qualifier,
    DatabaseCrossReference,
    QualifierType,
    make_qualifier,
)
from inscripta.biofeature.qualifiers.database_reference import DatabaseReference  # noqa: F401
from inscripta.biofeature.qualifiers.index import QualifierIndex  # noqa: F401
