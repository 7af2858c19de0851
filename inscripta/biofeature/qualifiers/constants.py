"""
Qualifier constants. Records the reserved qualifier names and the text form of database cross references.
"""

from enum import Enum

# GenBank cross references are written as ``/db_xref="<database>:<reference>"``
DATABASE_REFERENCE_SEPARATOR = ":"


class QualifierKind(str, Enum):
    """Tags the two qualifier variants."""

    PLAIN = "plain"
    DATABASE_REFERENCE = "database_reference"


class ReservedQualifiers(str, Enum):
    """Qualifier names with a meaning of their own."""

    DATABASE_REFERENCE = "db_xref"
