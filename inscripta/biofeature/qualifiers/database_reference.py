"""
The database reference aggregate groups every ``(database, reference)`` pair of a feature, in insertion order. A
feature annotated from a GenBank record with several ``/db_xref`` lines has one aggregate holding all of them, and
one database may appear any number of times.
"""
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from methodtools import lru_cache

from inscripta.biofeature.qualifiers.qualifier import DatabaseCrossReference, QualifierType
from inscripta.biofeature.qualifiers.constants import DATABASE_REFERENCE_SEPARATOR, QualifierKind
from inscripta.biofeature.util.object_validation import ObjectValidation

DatabaseReferencePair = Tuple[str, str]


class DatabaseReference:
    """An immutable, ordered collection of ``(database, reference)`` pairs.

    Database names may not contain the ``:`` separator of the ``db_xref`` text form.

    Positional accessors (:meth:`database`, :meth:`reference`, :meth:`reference_for` and their ``first_``
    variants) return ``None`` when the position does not exist. The one exception is :meth:`entry` (also reachable
    through ``[]``), which follows Python sequence semantics: negative positions count from the end and an
    out-of-range position raises ``IndexError``.
    """

    def __init__(self, pairs: Optional[Iterable[Union[DatabaseReferencePair, DatabaseCrossReference]]] = None):
        entries = []
        for pair in pairs or []:
            if isinstance(pair, DatabaseCrossReference):
                pair = (pair.database, pair.reference)
            database, reference = pair
            ObjectValidation.require_database_name_unambiguous(database, DATABASE_REFERENCE_SEPARATOR)
            entries.append((database, reference))
        self._pairs: Tuple[DatabaseReferencePair, ...] = tuple(entries)

    def __str__(self):
        return "DatabaseReference({})".format(", ".join(f"{db}:{ref}" for db, ref in self._pairs))

    def __repr__(self):
        return "<{}>".format(str(self))

    def __len__(self):
        return len(self._pairs)

    def __iter__(self) -> Iterator[DatabaseReferencePair]:
        return iter(self._pairs)

    def __contains__(self, database: str) -> bool:
        """Returns True if any pair references ``database``."""
        return database in self._references_by_database

    def __eq__(self, other):
        if not isinstance(other, DatabaseReference):
            return False
        return self._pairs == other._pairs

    def __hash__(self):
        return hash(self._pairs)

    def __getitem__(self, i: int) -> DatabaseReferencePair:
        return self.entry(i)

    @staticmethod
    def from_qualifiers(qualifiers: Iterable[QualifierType]) -> Optional["DatabaseReference"]:
        """Collects the database cross references among ``qualifiers``. Returns ``None`` if there are none."""
        pairs = [q for q in qualifiers if q.kind == QualifierKind.DATABASE_REFERENCE]
        if not pairs:
            return None
        return DatabaseReference(pairs)

    def to_qualifiers(self) -> List[DatabaseCrossReference]:
        return [DatabaseCrossReference(database, reference) for database, reference in self._pairs]

    def append(self, database: str, reference: str) -> "DatabaseReference":
        """Returns a new aggregate with one more pair at the end."""
        return DatabaseReference(self._pairs + ((database, reference),))

    def extend(self, other: "DatabaseReference") -> "DatabaseReference":
        """Returns a new aggregate holding the pairs of this aggregate followed by the pairs of ``other``."""
        return DatabaseReference(self._pairs + other._pairs)

    @property
    def pairs(self) -> List[DatabaseReferencePair]:
        return list(self._pairs)

    def entry(self, i: int) -> DatabaseReferencePair:
        """Returns the ``(database, reference)`` pair at position ``i``.

        Raises:
            IndexError: If ``i`` is out of range.
        """
        return self._pairs[i]

    @lru_cache(maxsize=1)
    @property
    def _references_by_database(self) -> Dict[str, List[str]]:
        by_database = {}
        for database, reference in self._pairs:
            by_database.setdefault(database, []).append(reference)
        return by_database

    @property
    def databases(self) -> List[str]:
        """The database of every pair, aligned position by position with :attr:`references`."""
        return [database for database, _ in self._pairs]

    @property
    def unique_databases(self) -> List[str]:
        """Distinct databases in order of first appearance."""
        return list(self._references_by_database)

    @property
    def references(self) -> List[str]:
        return [reference for _, reference in self._pairs]

    def references_for(self, database: str) -> List[str]:
        """All references into ``database``, in insertion order. Empty if the database is not referenced."""
        return list(self._references_by_database.get(database, []))

    def _in_range(self, i: int, size: int) -> bool:
        return 0 <= i < size

    def database(self, i: int) -> Optional[str]:
        if not self._in_range(i, len(self._pairs)):
            return None
        return self._pairs[i][0]

    def reference(self, i: int) -> Optional[str]:
        if not self._in_range(i, len(self._pairs)):
            return None
        return self._pairs[i][1]

    def reference_for(self, database: str, i: int) -> Optional[str]:
        """The ``i``-th reference into ``database``, counting only pairs of that database."""
        references = self._references_by_database.get(database, [])
        if not self._in_range(i, len(references)):
            return None
        return references[i]

    def first_database(self) -> Optional[str]:
        return self.database(0)

    def first_reference(self) -> Optional[str]:
        return self.reference(0)

    def first_reference_for(self, database: str) -> Optional[str]:
        return self.reference_for(database, 0)
