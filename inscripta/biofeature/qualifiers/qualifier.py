"""
Qualifiers are the atomic annotation unit of a feature: a name and a value.

There are two variants. A :class:`Qualifier` is a plain name/value pair. A :class:`DatabaseCrossReference` is a
pointer into an external database; its name is always the reserved ``db_xref`` and its value is the GenBank text
form ``<database>:<reference>``. Both are frozen, so a qualifier stored in an index never changes; replacing one
means removing it and adding another.

Qualifiers compare and hash on their name and the text form of their value, whichever variant they are. A plain
``Qualifier("db_xref", "GO:0005515")`` and ``DatabaseCrossReference("GO", "0005515")`` are the same annotation.
"""
import warnings
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from inscripta.biofeature.exc import MalformedDatabaseReferenceWarning
from inscripta.biofeature.qualifiers.constants import (
    DATABASE_REFERENCE_SEPARATOR,
    QualifierKind,
    ReservedQualifiers,
)
from inscripta.biofeature.util.object_validation import ObjectValidation


class QualifierBase:
    """Shared equality of the qualifier variants."""

    def __str__(self):
        return f"/{self.name}={self.value}"

    def _key(self):
        return self.name, str(self.value)

    def __eq__(self, other):
        if not isinstance(other, QualifierBase):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())


@dataclass(frozen=True, eq=False)
class Qualifier(QualifierBase):
    """A plain name/value annotation."""

    name: str
    value: str
    kind: ClassVar[QualifierKind] = QualifierKind.PLAIN


@dataclass(frozen=True, eq=False)
class DatabaseCrossReference(QualifierBase):
    """A single ``(database, reference)`` pair, e.g. ``("GO", "0005515")``.

    The database name may not contain the separator, since the text form is split at its first separator.
    """

    database: str
    reference: str
    kind: ClassVar[QualifierKind] = QualifierKind.DATABASE_REFERENCE

    def __post_init__(self):
        ObjectValidation.require_database_name_unambiguous(self.database, DATABASE_REFERENCE_SEPARATOR)

    @property
    def name(self) -> str:
        return ReservedQualifiers.DATABASE_REFERENCE.value

    @property
    def value(self) -> str:
        return f"{self.database}{DATABASE_REFERENCE_SEPARATOR}{self.reference}"

    @staticmethod
    def from_value(value: str) -> "DatabaseCrossReference":
        """Parse the ``<database>:<reference>`` text form. The database ends at the first separator, so references
        may themselves contain the separator.

        Raises:
            ValueError: If the value has no separator.
        """
        database, separator, reference = value.partition(DATABASE_REFERENCE_SEPARATOR)
        if not separator:
            raise ValueError(f"{value} is not of the form <database>{DATABASE_REFERENCE_SEPARATOR}<reference>")
        return DatabaseCrossReference(database, reference)


QualifierType = Union[Qualifier, DatabaseCrossReference]


def make_qualifier(name: str, value: Any) -> QualifierType:
    """Build the qualifier variant matching ``name``.

    Values are converted to strings. A ``db_xref`` value is parsed into a :class:`DatabaseCrossReference`; one
    without a database separator cannot be attributed to a database and is kept as a plain :class:`Qualifier`
    with a :class:`~biofeature.exc.MalformedDatabaseReferenceWarning`.
    """
    value = str(value)
    if name == ReservedQualifiers.DATABASE_REFERENCE.value:
        try:
            return DatabaseCrossReference.from_value(value)
        except ValueError:
            warnings.warn(
                MalformedDatabaseReferenceWarning(f"Database reference {value} has no database; kept as plain text")
            )
    return Qualifier(name, value)


def normalize_qualifier(qualifier: QualifierType) -> QualifierType:
    """Bring a qualifier into the form an index stores: plain values become strings and a plain ``db_xref``
    qualifier is promoted to a :class:`DatabaseCrossReference`. Other qualifiers are returned unchanged."""
    if qualifier.kind != QualifierKind.PLAIN:
        return qualifier
    if qualifier.name == ReservedQualifiers.DATABASE_REFERENCE.value or not isinstance(qualifier.value, str):
        return make_qualifier(qualifier.name, qualifier.value)
    return qualifier
