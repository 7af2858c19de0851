"""
The qualifier index is the multi-valued, insertion-ordered store behind every feature's qualifiers.

Two editing intents are kept apart:

* :meth:`QualifierIndex.add` accumulates. Several qualifiers may share a name (a GenBank feature with many
  ``/db_xref`` lines) and adding never removes anything.
* :meth:`QualifierIndex.set` overwrites. Every qualifier with the same name is removed before the new one is
  appended, so setting a singleton field like ``/gene`` any number of times leaves exactly one entry.

Database cross references are ordinary entries of the index. The database reference aggregate is a view over
them: reading it collects every :class:`~biofeature.qualifiers.qualifier.DatabaseCrossReference` in order, and
writing it replaces all of them.
"""
import logging
from copy import deepcopy
from typing import Dict, Iterable, Iterator, List, Optional

from inscripta.biofeature.qualifiers.constants import ReservedQualifiers
from inscripta.biofeature.qualifiers.database_reference import DatabaseReference
from inscripta.biofeature.qualifiers.qualifier import QualifierType, normalize_qualifier
from inscripta.biofeature.util.object_validation import ObjectValidation

logger = logging.getLogger(__name__)


class QualifierIndex:
    """Ordered, name-keyed, multi-valued container of qualifiers.

    Lookups never raise when nothing matches: list lookups return an empty list and single lookups return ``None``.
    Inserting a qualifier with an empty name raises :class:`~biofeature.exc.InvalidQualifierException`.
    """

    def __init__(self, qualifiers: Optional[Iterable[QualifierType]] = None):
        self._entries: List[QualifierType] = []
        self._positions_by_name: Dict[str, List[int]] = {}
        self._positions_by_value: Dict[str, List[int]] = {}
        if qualifiers:
            self.add_all(qualifiers)

    def __str__(self):
        return "QualifierIndex({})".format(", ".join(str(q) for q in self._entries))

    def __repr__(self):
        return "<{}>".format(str(self))

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[QualifierType]:
        return iter(list(self._entries))

    def __contains__(self, name: str) -> bool:
        return name in self._positions_by_name

    def __eq__(self, other):
        if not isinstance(other, QualifierIndex):
            return False
        return self._entries == other._entries

    def __deepcopy__(self, memo) -> "QualifierIndex":
        # entries are frozen, so copying the containers is enough
        index = QualifierIndex.__new__(QualifierIndex)
        index._entries = list(self._entries)
        index._positions_by_name = {k: list(v) for k, v in self._positions_by_name.items()}
        index._positions_by_value = {k: list(v) for k, v in self._positions_by_value.items()}
        return index

    def copy(self) -> "QualifierIndex":
        return deepcopy(self)

    def _append(self, qualifier: QualifierType):
        ObjectValidation.require_qualifier_has_name(qualifier)
        self._store(normalize_qualifier(qualifier))

    def _store(self, qualifier: QualifierType):
        position = len(self._entries)
        self._entries.append(qualifier)
        self._positions_by_name.setdefault(qualifier.name, []).append(position)
        self._positions_by_value.setdefault(qualifier.value, []).append(position)

    def _rebuild(self, entries: List[QualifierType]):
        self._entries = []
        self._positions_by_name = {}
        self._positions_by_value = {}
        for qualifier in entries:
            self._store(qualifier)

    def _at(self, positions: Iterable[int]) -> List[QualifierType]:
        return [self._entries[i] for i in positions]

    def add(self, qualifier: QualifierType):
        """Appends ``qualifier``. Existing entries are never removed."""
        self._append(qualifier)

    def add_all(self, qualifiers: Iterable[QualifierType]):
        for qualifier in qualifiers:
            self.add(qualifier)

    def set(self, qualifier: QualifierType):
        """Removes every entry named ``qualifier.name``, then appends ``qualifier``."""
        ObjectValidation.require_qualifier_has_name(qualifier)
        self.remove(qualifier.name)
        self._append(qualifier)

    def set_all(self, qualifiers: Iterable[QualifierType]):
        """Replaces the whole contents of this index with ``qualifiers``."""
        qualifiers = list(qualifiers)
        for qualifier in qualifiers:
            ObjectValidation.require_qualifier_has_name(qualifier)
        self._rebuild([])
        self.add_all(qualifiers)

    def remove(self, name: str) -> List[QualifierType]:
        """Removes every entry named ``name`` and returns the removed entries in insertion order."""
        if name not in self._positions_by_name:
            return []
        removed = self.by_name(name)
        logger.debug(f"Removing {len(removed)} qualifier(s) named {name}")
        self._rebuild([q for q in self._entries if q.name != name])
        return removed

    def clear(self):
        self._rebuild([])

    def all(self) -> List[QualifierType]:
        return list(self._entries)

    def names(self) -> List[str]:
        """Distinct qualifier names in order of first appearance."""
        return list(self._positions_by_name)

    def by_name(self, name: str) -> List[QualifierType]:
        return self._at(self._positions_by_name.get(name, []))

    def first_by_name(self, name: str) -> Optional[QualifierType]:
        positions = self._positions_by_name.get(name)
        return self._entries[positions[0]] if positions else None

    def by_value(self, value: str) -> List[QualifierType]:
        return self._at(self._positions_by_value.get(value, []))

    def first_by_value(self, value: str) -> Optional[QualifierType]:
        positions = self._positions_by_value.get(value)
        return self._entries[positions[0]] if positions else None

    def by_name_and_value(self, name: str, value: str) -> List[QualifierType]:
        by_value = set(self._positions_by_value.get(value, []))
        return self._at(i for i in self._positions_by_name.get(name, []) if i in by_value)

    def to_dict(self) -> Dict[str, List[str]]:
        """Exports to a dictionary of value lists keyed by name, the shape BioPython uses for
        ``SeqFeature.qualifiers``. Names appear in order of first appearance."""
        return {name: [q.value for q in self.by_name(name)] for name in self._positions_by_name}

    def database_reference_aggregate(self) -> Optional[DatabaseReference]:
        """Collects every database cross reference into one aggregate. Returns ``None`` if there are none."""
        return DatabaseReference.from_qualifiers(self._entries)

    def set_database_reference_aggregate(self, database_reference: DatabaseReference):
        """Replaces every ``db_xref`` entry with the pairs of ``database_reference``."""
        self.remove(ReservedQualifiers.DATABASE_REFERENCE.value)
        self.add_database_reference_aggregate(database_reference)

    def add_database_reference_aggregate(self, database_reference: DatabaseReference):
        """Appends the pairs of ``database_reference`` after the existing entries."""
        self.add_all(database_reference.to_qualifiers())

    def all_databases(self) -> List[str]:
        """The database of every cross reference, in order."""
        aggregate = self.database_reference_aggregate()
        return aggregate.databases if aggregate else []

    def all_database_references(self, database: Optional[str] = None) -> List[str]:
        """Every cross reference, or only those into ``database`` if one is given."""
        aggregate = self.database_reference_aggregate()
        if aggregate is None:
            return []
        if database is None:
            return aggregate.references
        return aggregate.references_for(database)

    def database_reference_entry(self, i: int) -> Optional[DatabaseReference]:
        """Cross reference ``i`` as a single-pair aggregate, or ``None`` if there is no such cross reference."""
        aggregate = self.database_reference_aggregate()
        if aggregate is None or aggregate.database(i) is None:
            return None
        return DatabaseReference([aggregate.entry(i)])

    def database(self, i: int) -> Optional[str]:
        aggregate = self.database_reference_aggregate()
        return aggregate.database(i) if aggregate else None

    def database_reference(self, i: int) -> Optional[str]:
        aggregate = self.database_reference_aggregate()
        return aggregate.reference(i) if aggregate else None

    def database_reference_for(self, database: str, i: int) -> Optional[str]:
        aggregate = self.database_reference_aggregate()
        return aggregate.reference_for(database, i) if aggregate else None

    def first_database_reference_entry(self) -> Optional[DatabaseReference]:
        return self.database_reference_entry(0)

    def first_database(self) -> Optional[str]:
        return self.database(0)

    def first_database_reference(self) -> Optional[str]:
        return self.database_reference(0)

    def first_database_reference_for(self, database: str) -> Optional[str]:
        return self.database_reference_for(database, 0)
