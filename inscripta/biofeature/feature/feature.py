"""
Object representation of sequence features.

A :class:`FeatureNode` is any descriptive item that can be associated with sequence positions: a mutation, a post
translational modification, a PFAM domain, a helix. It has a type and a source, which are free-form strings, a
location owned by the caller, a qualifier index, and optional child features. A domain could contain secondary
structure features, and a helix could contain children of its own.

The parent/child links are only changed through :meth:`FeatureNode.attach_child` and
:meth:`FeatureNode.detach_child`, which update both directions at once. A feature has at most one parent, and
attaching a feature that still has a parent is an error rather than an implicit move.
"""
import logging
import weakref
from copy import deepcopy
from typing import Any, Dict, Iterable, Iterator, List, Optional
from uuid import UUID

from Bio.SeqFeature import SeqFeature

from inscripta.biofeature import LocationLike
from inscripta.biofeature.exc import FeatureHierarchyException
from inscripta.biofeature.feature.ordering import sort_features
from inscripta.biofeature.location.location import FeatureLocation
from inscripta.biofeature.qualifiers.database_reference import DatabaseReference
from inscripta.biofeature.qualifiers.index import QualifierIndex
from inscripta.biofeature.qualifiers.qualifier import QualifierType, Qualifier, make_qualifier
from inscripta.biofeature.util.hashing import digest_object
from inscripta.biofeature.util.object_validation import ObjectValidation

logger = logging.getLogger(__name__)


class FeatureNode:
    """A feature has a type and a source, and optionally a location, descriptions, qualifiers and children.

    ``user_payload`` is an opaque slot for caller data, for example the object a GUI wants back when the feature is
    clicked. It is stored and returned as is, and shared (never copied) by :meth:`copy`.
    """

    def __init__(
        self,
        feature_type: str,
        source: str,
        *,
        location: Optional[LocationLike] = None,
        description: str = "",
        short_description: str = "",
        qualifiers: Optional[Iterable[QualifierType]] = None,
        user_payload: Optional[Any] = None,
    ):
        self.feature_type = feature_type
        self.source = source
        self.location = location
        self.description = description
        self.short_description = short_description
        self.user_payload = user_payload
        self._qualifiers = QualifierIndex(qualifiers)
        self._parent_ref: Optional[weakref.ref] = None
        self._children: List["FeatureNode"] = []

    def __str__(self):
        return f"FeatureNode(type={self.feature_type}, source={self.source}, location={self.location})"

    def __repr__(self):
        return "<{}>".format(str(self))

    @property
    def feature_type(self) -> str:
        return self._feature_type

    @feature_type.setter
    def feature_type(self, feature_type: Optional[str]):
        self._feature_type = feature_type if feature_type is not None else ""

    @property
    def source(self) -> str:
        return self._source

    @source.setter
    def source(self, source: Optional[str]):
        self._source = source if source is not None else ""

    @property
    def start(self):
        """Start position of the location. Raises NullLocationException if there is no location."""
        ObjectValidation.require_feature_has_location(self)
        return self.location.start

    @property
    def end(self):
        """End position of the location. Raises NullLocationException if there is no location."""
        ObjectValidation.require_feature_has_location(self)
        return self.location.end

    @property
    def length(self):
        """Span of the location, ``|end - start|``. Not strand aware."""
        return abs(self.end - self.start)

    # Hierarchy

    @property
    def parent(self) -> Optional["FeatureNode"]:
        """The feature this feature is a child of. The reference is weak: a parent that has been garbage collected
        reads as ``None``."""
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def children(self) -> tuple:
        """Child features, in order."""
        return tuple(self._children)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self._children

    def ancestors(self) -> Iterator["FeatureNode"]:
        """Yields the parent, the parent of the parent, and so on."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def root(self) -> "FeatureNode":
        node = self
        for node in self.ancestors():
            pass
        return node

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.ancestors())

    def walk(self) -> Iterator["FeatureNode"]:
        """Pre-order traversal of this feature and all of its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def attach_child(self, child: "FeatureNode", index: Optional[int] = None):
        """Make ``child`` a child of this feature, at the end or at position ``index``.

        Raises:
            FeatureAlreadyHasParentException: If ``child`` already has a parent.
            FeatureCycleException: If ``child`` is this feature or one of its ancestors.
        """
        ObjectValidation.require_feature_has_no_parent(child)
        ObjectValidation.require_feature_not_ancestor(child, self)
        if index is None:
            self._children.append(child)
        else:
            self._children.insert(index, child)
        child._parent_ref = weakref.ref(self)
        logger.debug(f"Attached {child} to {self}")

    def detach_child(self, child: "FeatureNode"):
        """Remove ``child`` from the children of this feature and clear its parent.

        Raises:
            NotAChildException: If ``child`` is not a child of this feature.
        """
        ObjectValidation.require_feature_is_child(self, child)
        self._children = [c for c in self._children if c is not child]
        child._parent_ref = None
        logger.debug(f"Detached {child} from {self}")

    def detach(self):
        """Detach this feature from its parent, if it has one."""
        parent = self.parent
        if parent is not None:
            parent.detach_child(self)

    def set_children(self, children: Iterable["FeatureNode"]):
        """Replace all children of this feature. Current children are detached. Every new child must either have no
        parent or already be a child of this feature; nothing is changed if any of them is invalid."""
        children = list(children)
        seen = set()
        for child in children:
            if id(child) in seen:
                raise FeatureHierarchyException(f"Feature {child} appears more than once in the new children")
            seen.add(id(child))
            if child.parent is not self:
                ObjectValidation.require_feature_has_no_parent(child)
            ObjectValidation.require_feature_not_ancestor(child, self)
        for child in self._children:
            child._parent_ref = None
        self._children = []
        for child in children:
            self.attach_child(child)

    def sort_children(self, *orderings):
        """Reorder the children of this feature in place using one or more
        :class:`~biofeature.feature.ordering.FeatureOrdering` values or comparators."""
        self._children = sort_features(self._children, *orderings)

    # Copying

    def __deepcopy__(self, memo) -> "FeatureNode":
        feature = FeatureNode(
            self.feature_type,
            self.source,
            location=self.location,
            description=self.description,
            short_description=self.short_description,
            user_payload=self.user_payload,
        )
        memo[id(self)] = feature
        feature._qualifiers = deepcopy(self._qualifiers, memo)
        for child in self._children:
            feature.attach_child(deepcopy(child, memo))
        return feature

    def copy(self) -> "FeatureNode":
        """Copy this feature and its subtree. Qualifiers and children are copied; the location and user payload are
        shared with the original. The copy has no parent."""
        return deepcopy(self)

    def content_digest(self) -> UUID:
        """MD5 based UUID of the annotation content of this feature and its subtree. Features with equal types,
        sources, descriptions, locations, qualifiers (in order) and children share a digest."""
        if self.location is not None:
            location = FeatureLocation.from_location_like(self.location).to_dict()
        else:
            location = None
        return digest_object(
            self.feature_type,
            self.source,
            self.description,
            self.short_description,
            location,
            [(q.name, q.value) for q in self._qualifiers],
            [child.content_digest() for child in self._children],
        )

    # Qualifiers

    @property
    def qualifier_index(self) -> QualifierIndex:
        return self._qualifiers

    @property
    def qualifiers(self) -> List[QualifierType]:
        """All qualifiers of this feature, in insertion order."""
        return self._qualifiers.all()

    def set_qualifiers(self, qualifiers: Iterable[QualifierType]):
        """Replace all qualifiers of this feature."""
        self._qualifiers.set_all(qualifiers)

    def set_qualifier(self, qualifier: QualifierType):
        """Replace every qualifier named ``qualifier.name`` with ``qualifier``."""
        self._qualifiers.set(qualifier)

    def add_qualifier(self, qualifier: QualifierType):
        self._qualifiers.add(qualifier)

    def add_qualifiers(self, qualifiers: Iterable[QualifierType]):
        self._qualifiers.add_all(qualifiers)

    def remove_qualifiers(self, name: str) -> List[QualifierType]:
        return self._qualifiers.remove(name)

    def qualifiers_by_name(self, name: str) -> List[QualifierType]:
        return self._qualifiers.by_name(name)

    def first_qualifier_by_name(self, name: str) -> Optional[QualifierType]:
        return self._qualifiers.first_by_name(name)

    def qualifiers_by_value(self, value: str) -> List[QualifierType]:
        return self._qualifiers.by_value(value)

    def first_qualifier_by_value(self, value: str) -> Optional[QualifierType]:
        return self._qualifiers.first_by_value(value)

    def qualifiers_by_name_and_value(self, name: str, value: str) -> List[QualifierType]:
        return self._qualifiers.by_name_and_value(name, value)

    # Database references

    def database_reference_aggregate(self) -> Optional[DatabaseReference]:
        return self._qualifiers.database_reference_aggregate()

    def set_database_reference_aggregate(self, database_reference: DatabaseReference):
        self._qualifiers.set_database_reference_aggregate(database_reference)

    def add_database_reference_aggregate(self, database_reference: DatabaseReference):
        self._qualifiers.add_database_reference_aggregate(database_reference)

    def all_databases(self) -> List[str]:
        return self._qualifiers.all_databases()

    def all_database_references(self, database: Optional[str] = None) -> List[str]:
        return self._qualifiers.all_database_references(database)

    def database_reference_entry(self, i: int) -> Optional[DatabaseReference]:
        return self._qualifiers.database_reference_entry(i)

    def database(self, i: int) -> Optional[str]:
        return self._qualifiers.database(i)

    def database_reference(self, i: int) -> Optional[str]:
        return self._qualifiers.database_reference(i)

    def database_reference_for(self, database: str, i: int) -> Optional[str]:
        return self._qualifiers.database_reference_for(database, i)

    def first_database_reference_entry(self) -> Optional[DatabaseReference]:
        return self._qualifiers.first_database_reference_entry()

    def first_database(self) -> Optional[str]:
        return self._qualifiers.first_database()

    def first_database_reference(self) -> Optional[str]:
        return self._qualifiers.first_database_reference()

    def first_database_reference_for(self, database: str) -> Optional[str]:
        return self._qualifiers.first_database_reference_for(database)

    # Conversion

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict usable by :class:`~biofeature.models.FeatureNodeModel`. The user payload is not
        exported."""
        return dict(
            feature_type=self.feature_type,
            source=self.source,
            description=self.description,
            short_description=self.short_description,
            location=FeatureLocation.from_location_like(self.location).to_dict() if self.location is not None else None,
            qualifiers=[dict(name=q.name, value=str(q.value)) for q in self._qualifiers],
            children=[child.to_dict() for child in self._children],
        )

    @staticmethod
    def from_dict(vals: Dict[str, Any]) -> "FeatureNode":
        """Build a :class:`FeatureNode` tree from a dictionary."""
        location = vals.get("location")
        feature = FeatureNode(
            vals["feature_type"],
            vals["source"],
            location=FeatureLocation.from_dict(location) if location else None,
            description=vals.get("description") or "",
            short_description=vals.get("short_description") or "",
            qualifiers=[Qualifier(q["name"], q["value"]) for q in vals.get("qualifiers") or []],
        )
        for child in vals.get("children") or []:
            feature.attach_child(FeatureNode.from_dict(child))
        return feature

    def to_biopython(self) -> SeqFeature:
        """Convert to a BioPython ``SeqFeature``. BioPython has no notion of a feature source or child features, so
        neither is exported."""
        location = None
        if self.location is not None:
            location = FeatureLocation.from_location_like(self.location).to_biopython()
        return SeqFeature(location=location, type=self.feature_type, qualifiers=self._qualifiers.to_dict())

    @staticmethod
    def from_biopython(seq_feature: SeqFeature, source: str = "") -> "FeatureNode":
        """Build a :class:`FeatureNode` from a BioPython ``SeqFeature``. Qualifier values may be single values or
        lists of values; every value becomes its own qualifier."""
        location = FeatureLocation.from_biopython(seq_feature.location) if seq_feature.location is not None else None
        feature = FeatureNode(seq_feature.type, source, location=location)
        for name, values in seq_feature.qualifiers.items():
            if not isinstance(values, (list, tuple)):
                values = [values]
            feature.add_qualifiers(make_qualifier(name, value) for value in values)
        return feature
